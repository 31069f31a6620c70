"""Pattern classifier — split projected paths by glob patterns.

Patterns come from the project configuration and are written relative to
the mount prefix (``vendor/**``, ``*_test.go``). Each one is joined onto the
prefix and matched as a plain recursive glob against the whole path:

- ``*`` matches within a single path segment, never across ``/``
- ``**`` as a whole segment matches zero or more segments
- ``?`` and ``[...]`` match a single character
- ``{a,b}`` matches either alternative

A pattern naming a directory matches that path only, not the files under
it. A pattern with unbalanced brackets or braces, or a dangling escape,
matches nothing. It is logged and skipped; classification always completes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from wcmatch import glob as wcglob

from configgen.errors import PatternMatchError
from configgen.models import ClassificationResult
from configgen.paths import join_mount

logger = logging.getLogger(__name__)

GLOB_FLAGS = wcglob.GLOBSTAR | wcglob.DOTGLOB | wcglob.BRACE


@dataclass(frozen=True)
class CompiledPattern:
    """A pattern as written in the config, plus its compiled form."""

    pattern: str
    glob: str  # Absolute glob under the mount prefix
    valid: bool = True  # False when the pattern is malformed

    def matches(self, path: str) -> bool:
        return self.valid and wcglob.globmatch(path, self.glob, flags=GLOB_FLAGS)


def check_syntax(glob: str) -> None:
    """Reject globs with unclosed ``[``/``{`` or a trailing escape.

    Raises:
        PatternMatchError: describing the first problem found.
    """
    i, end = 0, len(glob)
    braces = 0
    while i < end:
        char = glob[i]
        if char == "\\":
            if i + 1 >= end:
                raise PatternMatchError(glob, "trailing escape character")
            i += 2
            continue
        if char == "[":
            j = i + 1
            if j < end and glob[j] in "!^":
                j += 1
            if j < end and glob[j] == "]":
                j += 1  # ']' first in a class is literal
            while j < end and glob[j] != "]":
                if glob[j] == "\\":
                    j += 1
                j += 1
            if j >= end:
                raise PatternMatchError(glob, "unclosed character class")
            i = j + 1
            continue
        if char == "{":
            braces += 1
        elif char == "}":
            if not braces:
                raise PatternMatchError(glob, "unmatched '}'")
            braces -= 1
        i += 1
    if braces:
        raise PatternMatchError(glob, "unclosed '{'")


def compile_glob(glob: str) -> None:
    """Check that an absolute glob compiles.

    Raises:
        PatternMatchError: if the glob is malformed.
    """
    check_syntax(glob)
    try:
        wcglob.translate(glob, flags=GLOB_FLAGS)
    except ValueError as e:
        raise PatternMatchError(glob, str(e)) from e


def compile_patterns(mount_prefix: str, patterns: Sequence[str]) -> list[CompiledPattern]:
    """Compile every pattern, keeping input order.

    Patterns that fail to compile are kept as non-matching entries so that
    indices still line up with the configuration.
    """
    compiled = []
    for pattern in patterns:
        glob = join_mount(mount_prefix, pattern)
        valid = True
        try:
            compile_glob(glob)
        except PatternMatchError as e:
            logger.warning("Pattern %r: %s; treating it as matching nothing", pattern, e.reason)
            valid = False
        compiled.append(CompiledPattern(pattern=pattern, glob=glob, valid=valid))
    return compiled


def first_match(path: str, compiled: Sequence[CompiledPattern]) -> CompiledPattern | None:
    """Return the first pattern matching ``path``, or None."""
    for candidate in compiled:
        if candidate.matches(path):
            return candidate
    return None


def classify(
    mount_prefix: str,
    paths: Sequence[str],
    patterns: Sequence[str],
) -> ClassificationResult:
    """Partition ``paths`` into those matching no pattern and those matching one.

    Both output sequences preserve input order, and every input path lands
    in exactly one of them.
    """
    compiled = compile_patterns(mount_prefix, patterns)

    kept: list[str] = []
    matched: list[str] = []
    for path in paths:
        if first_match(path, compiled) is not None:
            matched.append(path)
        else:
            kept.append(path)

    logger.debug(
        "Classified %d paths against %d patterns: %d kept, %d matched",
        len(paths), len(compiled), len(kept), len(matched),
    )
    return ClassificationResult(kept=tuple(kept), matched=tuple(matched))
