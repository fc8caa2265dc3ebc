"""Models for DeepContext import analysis."""

from .analysis_models import (
    AliasConfig,
    AnalysisResult,
    AnalyzeImportsResponse,
    ListSourceFilesResponse,
    ResolveImportResponse,
    SourceFile,
)
from .tsconfig_models import CompilerOptions, TsConfigFile

__all__ = [
    "AliasConfig",
    "AnalysisResult",
    "AnalyzeImportsResponse",
    "CompilerOptions",
    "ListSourceFilesResponse",
    "ResolveImportResponse",
    "SourceFile",
    "TsConfigFile",
]
