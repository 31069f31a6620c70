"""Language defaults — analyzer metadata used when a project has no config.

The registry maps a language identifier to the ``analyzer_meta`` value
emitted for unconfigured projects. Additional languages can be registered
in code or loaded from a YAML mapping::

    java:
      meta:
        java_version: 17
    python:
      meta:
        runtime_version: "3.x.x"
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from configgen.errors import DefaultsLoadError

BUILTIN_DEFAULTS: dict[str, Any] = {
    "java": {"meta": {"java_version": 17}},
}


class LanguageDefaults:
    """Registry of default analyzer metadata keyed by language identifier."""

    def __init__(self, defaults: dict[str, Any] | None = None):
        self._defaults: dict[str, Any] = {}
        for language, meta in (BUILTIN_DEFAULTS if defaults is None else defaults).items():
            self.register(language, meta)

    def register(self, language: str, meta: Any) -> None:
        """Add or replace the default metadata for ``language``."""
        self._defaults[language] = copy.deepcopy(meta)

    def lookup(self, language: str) -> Any:
        """Return a copy of the metadata for ``language``; ``{}`` when unknown."""
        if language not in self._defaults:
            return {}
        return copy.deepcopy(self._defaults[language])

    def languages(self) -> list[str]:
        return sorted(self._defaults)

    def __contains__(self, language: str) -> bool:
        return language in self._defaults

    def load_yaml(self, path: str | Path) -> None:
        """Merge a YAML mapping of language -> metadata into the registry."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise DefaultsLoadError(f"Cannot load language defaults from {path}: {e}") from e

        if data is None:
            return
        if not isinstance(data, dict):
            raise DefaultsLoadError(
                f"Language defaults in {path} must be a mapping, got {type(data).__name__}"
            )
        for language, meta in data.items():
            self.register(str(language), meta)
