"""Path projection — re-root scanned paths under the logical mount prefix.

Analyzers see the project mounted at a fixed location (``/code``), so every
path written to the analysis config is expressed relative to that mount
rather than to wherever the tree happens to live on disk.
"""

from __future__ import annotations

import posixpath
from collections.abc import Sequence

from configgen import DEFAULT_MOUNT_PREFIX


def join_mount(mount_prefix: str, relative: str) -> str:
    """Join ``relative`` onto ``mount_prefix`` and clean the result.

    A leading separator in ``relative`` does not escape the mount:
    ``join_mount("/code", "/a.go") == "/code/a.go"``. An empty remainder
    yields the mount prefix itself.
    """
    return posixpath.normpath(f"{mount_prefix}/{relative}")


def project(
    root: str,
    raw_paths: Sequence[str],
    mount_prefix: str = DEFAULT_MOUNT_PREFIX,
) -> list[str]:
    """Project absolute paths under ``root`` into the mount namespace.

    Exactly ``len(root)`` leading characters are stripped from each path;
    callers guarantee every path starts with ``root``. Output order and
    length match the input.
    """
    cut = len(root)
    return [join_mount(mount_prefix, raw[cut:]) for raw in raw_paths]
