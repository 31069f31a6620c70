"""Data models — project configuration, classification results, analysis config."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AnalyzerEntry:
    """One ``[[analyzers]]`` table from the project configuration."""

    name: str
    enabled: bool = False
    runtime_version: str = ""
    dependency_file_paths: list[str] = field(default_factory=list)
    meta: Any = None  # Opaque, passed through to the analyzer
    thresholds: Any = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"name": self.name, "enabled": self.enabled}
        if self.runtime_version:
            data["runtime_version"] = self.runtime_version
        if self.dependency_file_paths:
            data["dependency_file_paths"] = list(self.dependency_file_paths)
        if self.meta is not None:
            data["meta"] = self.meta
        if self.thresholds is not None:
            data["thresholds"] = self.thresholds
        return data


@dataclass
class ProjectConfig:
    """Parsed ``.deepsource.toml``."""

    version: int = 1
    exclude_patterns: list[str] = field(default_factory=list)
    test_patterns: list[str] = field(default_factory=list)
    analyzers: list[AnalyzerEntry] = field(default_factory=list)
    transformers: list[dict] = field(default_factory=list)

    def find_analyzer(self, name: str) -> AnalyzerEntry | None:
        """Return the first analyzer whose name is exactly ``name``."""
        for analyzer in self.analyzers:
            if analyzer.name == name:
                return analyzer
        return None


@dataclass(frozen=True)
class ClassificationResult:
    """Partition of a path list into paths that matched no pattern and paths that matched one."""

    kept: tuple[str, ...] = ()
    matched: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisConfig:
    """The generated analysis configuration for one run."""

    files: tuple[str, ...] = ()
    exclude_files: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    test_files: tuple[str, ...] = ()
    test_patterns: tuple[str, ...] = ()
    analyzer_meta: Any = None

    def to_dict(self) -> dict:
        """Serialize using the keys downstream analyzers read."""
        meta = self.analyzer_meta
        if isinstance(meta, AnalyzerEntry):
            meta = meta.to_dict()
        return {
            "files": list(self.files),
            "exclude_patterns": list(self.exclude_patterns),
            "exclude_files": list(self.exclude_files),
            "test_files": list(self.test_files),
            "test_patterns": list(self.test_patterns),
            "analyzer_meta": meta,
        }
