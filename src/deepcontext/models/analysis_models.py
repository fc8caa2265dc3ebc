"""Dataclass models for import analysis results and tool output schemas."""

import os
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    """A file read during one traversal run."""

    path: str  # Absolute path, unique per run
    content: str
    specifiers: tuple[str, ...] = ()  # Raw import specifiers in appearance order


@dataclass
class AliasConfig:
    """Alias patterns found in the nearest project configuration file."""

    base_url: str | None = None
    paths: dict[str, list[str]] = field(default_factory=dict)
    config_dir: str | None = None  # Directory holding the configuration file

    @property
    def is_empty(self) -> bool:
        return not self.paths or self.config_dir is None

    @property
    def base_dir(self) -> str | None:
        """Directory that alias replacements are joined against."""
        if self.config_dir is None:
            return None
        if self.base_url:
            return os.path.normpath(os.path.join(self.config_dir, self.base_url))
        return self.config_dir


@dataclass
class AnalysisResult:
    """Content and resolved imports of every file processed in one run."""

    content: dict[str, str] = field(default_factory=dict)
    imports: dict[str, list[str]] = field(default_factory=dict)

    def record(self, source: SourceFile, resolved: list[str]) -> None:
        self.content[source.path] = source.content
        self.imports[source.path] = resolved

    def to_dict(self) -> dict[str, Any]:
        return {"content": dict(self.content), "imports": {k: list(v) for k, v in self.imports.items()}}


@dataclass
class AnalyzeImportsResponse:
    """Response schema for analyze_imports tool."""

    content: dict[str, str]
    imports: dict[str, list[str]]
    total_files: int
    max_depth: int
    unresolved_imports: list[str] = field(default_factory=list)


@dataclass
class ResolveImportResponse:
    """Response schema for resolve_import tool."""

    specifier: str
    from_directory: str
    resolved_path: str
    exists: bool
    trace: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class ListSourceFilesResponse:
    """Response schema for list_source_files tool."""

    files: list[str]
    total: int
