"""Bounded, cycle-safe traversal of local imports.

Starting from a file, or every source file under a directory, each file is
read, its local specifiers are extracted and resolved, and the result is
recorded. Resolved imports that exist on disk are followed until
``max_depth`` hops from the starting files. Every path is read and expanded
at most once per run, so import cycles and diamonds terminate.
"""

import asyncio
import logging

from ..models.analysis_models import AnalysisResult, SourceFile
from .discovery import find_source_files
from .extractor import extract_imports
from .filesystem import FileSystem, LocalFileSystem, absolute_path, parent_directory
from .resolver import DEFAULT_MAX_ALIAS_REWRITES, PathResolver
from .tracer import NULL_TRACER, Tracer, make_tracer
from .tsconfig import DEFAULT_CONFIG_FILE_NAME, AliasConfigLoader

logger = logging.getLogger(__name__)


class ImportTraversal:
    """State of a single analysis run.

    The visited set and the result belong to this object alone, so concurrent
    runs never share state. All branches run on one event loop and nothing
    awaits between the visited check and the mark, which makes the
    check-and-mark atomic across branches.
    """

    def __init__(
        self,
        fs: FileSystem,
        max_depth: int = 0,
        resolver: PathResolver | None = None,
        tracer: Tracer = NULL_TRACER,
    ):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got: {max_depth}")
        self.fs = fs
        self.max_depth = max_depth
        self.tracer = tracer
        self.resolver = resolver or PathResolver(fs, tracer=tracer)
        self.visited: set[str] = set()
        self.result = AnalysisResult()

    async def run(self, path: str) -> AnalysisResult:
        """Analyze ``path`` (a file or a directory).

        Raises:
            FileNotFoundError: If ``path`` does not exist
            OSError: If the root file or directory cannot be read
        """
        root = absolute_path(path)
        if not await self.fs.exists(root):
            raise FileNotFoundError(f"Path does not exist: {root}")

        self.tracer.emit("analyze", path=root, max_depth=self.max_depth)

        if await self.fs.is_directory(root):
            initial_files = await find_source_files(self.fs, root)
            self.tracer.emit("discovered", directory=root, count=len(initial_files))
            await asyncio.gather(*(self._visit_listed(file_path) for file_path in initial_files))
        else:
            await self.visit(root, 0)

        return self.result

    async def visit(self, file_path: str, depth: int) -> None:
        if file_path in self.visited:
            self.tracer.emit("already_visited", path=file_path, depth=depth)
            return
        self.visited.add(file_path)

        source = await self._read(file_path)
        current_dir = parent_directory(file_path)
        resolved = await asyncio.gather(
            *(self.resolver.resolve(specifier, current_dir) for specifier in source.specifiers)
        )
        self.result.record(source, list(resolved))
        self.tracer.emit("recorded", path=file_path, depth=depth, imports=list(resolved))

        if depth >= self.max_depth:
            self.tracer.emit("max_depth_reached", path=file_path, depth=depth)
            return

        await asyncio.gather(*(self._follow(import_path, depth + 1) for import_path in resolved))

    async def _read(self, file_path: str) -> SourceFile:
        content = await self.fs.read_text(file_path)
        specifiers = tuple(extract_imports(content))
        self.tracer.emit("extracted", path=file_path, specifiers=list(specifiers))
        return SourceFile(path=file_path, content=content, specifiers=specifiers)

    async def _follow(self, import_path: str, depth: int) -> None:
        try:
            if not await self.fs.exists(import_path):
                logger.debug("Skipping unresolved import %s", import_path)
                self.tracer.emit("edge_skipped", path=import_path, reason="missing")
                return
            await self.visit(import_path, depth)
        except (OSError, ValueError) as e:
            logger.debug("Failed to process %s: %s", import_path, e)
            self.tracer.emit("edge_skipped", path=import_path, reason=str(e))

    async def _visit_listed(self, file_path: str) -> None:
        try:
            await self.visit(file_path, 0)
        except (OSError, ValueError) as e:
            logger.warning("Skipping unreadable file %s: %s", file_path, e)
            self.tracer.emit("file_skipped", path=file_path, reason=str(e))


async def analyze_imports(
    path: str,
    max_depth: int = 0,
    debug: bool = False,
    *,
    fs: FileSystem | None = None,
    config_file_name: str = DEFAULT_CONFIG_FILE_NAME,
    max_alias_rewrites: int = DEFAULT_MAX_ALIAS_REWRITES,
    tracer: Tracer | None = None,
) -> AnalysisResult:
    """Trace local imports from ``path`` up to ``max_depth`` hops.

    Args:
        path: File or directory to start from, relative to the working directory
        max_depth: Import hops to follow; 0 records only the starting files
        debug: Trace every resolution decision to the ``deepcontext.trace`` logger
        fs: File-system capability, the local disk by default
        config_file_name: Name of the alias configuration file to search for
        max_alias_rewrites: Upper bound on chained alias rewrites per specifier
        tracer: Explicit tracer, overrides ``debug``

    Returns:
        AnalysisResult with file contents and resolved imports keyed by absolute path
    """
    fs = fs or LocalFileSystem()
    tracer = tracer or make_tracer(debug)
    loader = AliasConfigLoader(fs, config_file_name=config_file_name, tracer=tracer)
    resolver = PathResolver(fs, loader, max_alias_rewrites=max_alias_rewrites, tracer=tracer)
    return await ImportTraversal(fs, max_depth, resolver, tracer).run(path)


def analyze_imports_sync(path: str, max_depth: int = 0, debug: bool = False, **kwargs) -> AnalysisResult:
    """Blocking wrapper around ``analyze_imports`` for callers without an event loop."""
    return asyncio.run(analyze_imports(path, max_depth, debug, **kwargs))
