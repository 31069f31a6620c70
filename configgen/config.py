"""Project configuration loader — read ``.deepsource.toml``."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from configgen import CONFIG_FILENAME
from configgen.errors import ConfigParseError
from configgen.models import AnalyzerEntry, ProjectConfig

logger = logging.getLogger(__name__)


def load_project_config(root: str | Path) -> ProjectConfig | None:
    """Load the project configuration under ``root``.

    Returns None when the project has no configuration file; that is a
    normal, unconfigured project rather than an error.

    Raises:
        ConfigParseError: if the file exists but cannot be read or parsed.
    """
    path = Path(root) / CONFIG_FILENAME
    if not path.is_file():
        logger.debug("No %s in %s", CONFIG_FILENAME, root)
        return None

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigParseError(str(path), str(e)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(str(path), f"invalid TOML: {e}") from e

    config = parse_project_config(data, source=str(path))
    logger.debug(
        "Loaded %s: %d exclude patterns, %d test patterns, %d analyzers",
        path, len(config.exclude_patterns), len(config.test_patterns), len(config.analyzers),
    )
    return config


def parse_project_config(data: dict, source: str = CONFIG_FILENAME) -> ProjectConfig:
    """Build a ProjectConfig from an already-decoded TOML document."""
    version = data.get("version", 1)
    if not isinstance(version, int) or isinstance(version, bool):
        raise ConfigParseError(source, f"'version' must be an integer, got {version!r}")

    analyzers = []
    for i, entry in enumerate(_table_list(data, "analyzers", source)):
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigParseError(source, f"analyzers[{i}] is missing a 'name'")
        enabled = entry.get("enabled", False)
        if not isinstance(enabled, bool):
            raise ConfigParseError(source, f"analyzers[{i}].enabled must be a boolean")
        analyzers.append(
            AnalyzerEntry(
                name=name,
                enabled=enabled,
                runtime_version=str(entry.get("runtime_version", "")),
                dependency_file_paths=_string_list(
                    entry, "dependency_file_paths", source, f"analyzers[{i}]."
                ),
                meta=entry.get("meta"),
                thresholds=entry.get("thresholds"),
            )
        )

    return ProjectConfig(
        version=version,
        exclude_patterns=_string_list(data, "exclude_patterns", source),
        test_patterns=_string_list(data, "test_patterns", source),
        analyzers=analyzers,
        transformers=_table_list(data, "transformers", source),
    )


def _string_list(data: dict, key: str, source: str, prefix: str = "") -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigParseError(source, f"'{prefix}{key}' must be a list of strings")
    return list(value)


def _table_list(data: dict, key: str, source: str) -> list[dict]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise ConfigParseError(source, f"'{key}' must be an array of tables")
    return list(value)
