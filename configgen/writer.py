"""Writer — persist the analysis config as JSON."""

from __future__ import annotations

import json
from pathlib import Path

from configgen import OUTPUT_FILENAME
from configgen.models import AnalysisConfig


def dump_config(config: AnalysisConfig) -> str:
    return json.dumps(config.to_dict(), indent=2) + "\n"


def write_config(root: str | Path, config: AnalysisConfig, output: str | Path | None = None) -> Path:
    """Write ``config`` to ``output``, or to ``analysis_config.json`` under ``root``.

    Returns the path written.
    """
    path = Path(output) if output else Path(root) / OUTPUT_FILENAME
    with open(path, "w") as f:
        f.write(dump_config(config))
    return path
