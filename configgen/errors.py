"""Error types raised by configgen."""

from __future__ import annotations


class ConfigGenError(Exception):
    """Base class for all configgen errors."""


class ConfigParseError(ConfigGenError):
    """The project configuration exists but could not be parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class PatternMatchError(ConfigGenError):
    """A glob pattern could not be compiled.

    Never escapes the classifier: the offending pattern is treated as
    matching nothing.
    """

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class DefaultsLoadError(ConfigGenError):
    """A language defaults file could not be loaded."""
