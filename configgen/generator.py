"""Config generator — assemble the analysis config for a project.

Ties the pieces together in a single pass:

1. Project every scanned file under the mount prefix.
2. Without a project config, every file is analyzable and the analyzer
   metadata comes from the language defaults registry.
3. With a project config, exclude patterns split the files into
   analyzable and excluded; test patterns are then applied to the
   analyzable files only, so an excluded file is never reported as a test.
4. Analyzer metadata is the config's analyzer entry whose name equals the
   requested language.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from configgen import DEFAULT_MOUNT_PREFIX
from configgen.classifier import classify
from configgen.defaults import LanguageDefaults
from configgen.models import AnalysisConfig, ProjectConfig
from configgen.paths import project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    """Parameters for a single generation run."""

    language: str = ""
    mount_prefix: str = DEFAULT_MOUNT_PREFIX


def generate_config(
    root: str,
    files: Sequence[str],
    project_config: ProjectConfig | None,
    options: RunOptions | None = None,
    defaults: LanguageDefaults | None = None,
) -> AnalysisConfig:
    """Build the AnalysisConfig for ``files`` found under ``root``."""
    options = options or RunOptions()
    projected = project(root, files, options.mount_prefix)

    if project_config is None:
        defaults = defaults or LanguageDefaults()
        logger.info("No project config; %d files analyzable", len(projected))
        return AnalysisConfig(
            files=tuple(projected),
            analyzer_meta=defaults.lookup(options.language),
        )

    excluded = classify(options.mount_prefix, projected, project_config.exclude_patterns)
    tests = classify(options.mount_prefix, excluded.kept, project_config.test_patterns)

    analyzer = project_config.find_analyzer(options.language)
    if analyzer is None and options.language:
        logger.info("No analyzer named %r in project config", options.language)

    logger.info(
        "%d files analyzable, %d excluded, %d tests",
        len(excluded.kept), len(excluded.matched), len(tests.matched),
    )
    return AnalysisConfig(
        files=excluded.kept,
        exclude_files=excluded.matched,
        exclude_patterns=tuple(project_config.exclude_patterns),
        test_files=tests.matched,
        test_patterns=tuple(project_config.test_patterns),
        analyzer_meta=analyzer,
    )
