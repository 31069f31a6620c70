"""File scanner — enumerate every file in a project tree."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def scan_files(root: str) -> list[str]:
    """Return the absolute path of every non-directory entry under ``root``.

    Entries are visited depth-first in lexical order, so a directory's
    contents appear where the directory name sorts among its siblings.
    Symlinks are listed but never followed. Entries that cannot be read
    are skipped.
    """
    files: list[str] = []
    _walk(root, files)
    logger.debug("Scanned %d files under %s", len(files), root)
    return files


def _walk(directory: str, files: list[str]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            _walk(entry.path, files)
        else:
            files.append(entry.path)
