"""Static tracing of local JavaScript/TypeScript import dependencies."""

from .constants import EXCLUDED_DIRECTORIES, SOURCE_EXTENSIONS
from .discovery import find_source_files, is_source_file
from .extractor import extract_imports
from .filesystem import DirectoryEntry, FileSystem, LocalFileSystem
from .resolver import PathResolver, resolve_import_path
from .tracer import CollectingTracer, LoggingTracer, Tracer, make_tracer
from .traversal import ImportTraversal, analyze_imports, analyze_imports_sync
from .tsconfig import AliasConfigLoader, parse_alias_config

__all__ = [
    "EXCLUDED_DIRECTORIES",
    "SOURCE_EXTENSIONS",
    "AliasConfigLoader",
    "CollectingTracer",
    "DirectoryEntry",
    "FileSystem",
    "ImportTraversal",
    "LocalFileSystem",
    "LoggingTracer",
    "PathResolver",
    "Tracer",
    "analyze_imports",
    "analyze_imports_sync",
    "extract_imports",
    "find_source_files",
    "is_source_file",
    "make_tracer",
    "parse_alias_config",
    "resolve_import_path",
]
