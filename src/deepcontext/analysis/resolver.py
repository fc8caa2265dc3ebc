"""Module specifier to file path resolution.

Resolution never fails. Alias specifiers are rewritten through the nearest
tsconfig ``paths`` mapping, then the candidate path is probed as an exact
file, with each source extension appended, and as a directory index. When
nothing exists on disk the literal joined path is returned as a best guess.
"""

import re

from .constants import SOURCE_EXTENSIONS
from .filesystem import FileSystem, LocalFileSystem, join_path
from .tracer import NULL_TRACER, Tracer
from .tsconfig import DEFAULT_CONFIG_FILE_NAME, AliasConfigLoader

ALIAS_MARKER = "@"
DEFAULT_MAX_ALIAS_REWRITES = 8

# A trailing dot-segment with no slash after it, e.g. "./styles.module.css"
_HAS_EXTENSION = re.compile(r"\.[^/.]+$")


class PathResolver:
    """Resolves import specifiers relative to a directory."""

    def __init__(
        self,
        fs: FileSystem,
        config_loader: AliasConfigLoader | None = None,
        extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
        max_alias_rewrites: int = DEFAULT_MAX_ALIAS_REWRITES,
        tracer: Tracer = NULL_TRACER,
    ):
        self.fs = fs
        self.config_loader = config_loader or AliasConfigLoader(fs, tracer=tracer)
        self.extensions = extensions
        self.max_alias_rewrites = max_alias_rewrites
        self.tracer = tracer

    async def resolve(self, specifier: str, current_dir: str) -> str:
        """Resolve ``specifier`` from ``current_dir`` to an absolute path string."""
        self.tracer.emit("resolve", specifier=specifier, current_dir=current_dir)

        rewrites = 0
        while specifier.startswith(ALIAS_MARKER):
            if rewrites >= self.max_alias_rewrites:
                self.tracer.emit("rewrite_limit", specifier=specifier, limit=self.max_alias_rewrites)
                break
            rewritten = await self._rewrite_alias(specifier, current_dir)
            if rewritten is None:
                break
            specifier, current_dir = rewritten
            rewrites += 1

        return await self._probe(specifier, current_dir)

    async def _rewrite_alias(self, specifier: str, current_dir: str) -> tuple[str, str] | None:
        config = await self.config_loader.load(current_dir)
        if config.is_empty:
            return None

        base_dir = config.base_dir
        for matcher in self.config_loader.matchers(config):
            target = matcher.rewrite(specifier)
            if target is None:
                continue
            rewritten = join_path(base_dir, target)
            self.tracer.emit(
                "alias_matched", pattern=matcher.pattern, replacement=matcher.replacement, rewritten=rewritten
            )
            return rewritten, base_dir

        self.tracer.emit("alias_miss", specifier=specifier)
        return None

    async def _probe(self, specifier: str, current_dir: str) -> str:
        candidate = join_path(current_dir, specifier)

        if _HAS_EXTENSION.search(specifier):
            if await self.fs.exists(candidate):
                self.tracer.emit("exact_match", path=candidate)
                return candidate
            self.tracer.emit("probe_miss", path=candidate)

        for ext in self.extensions:
            path_with_ext = candidate + ext
            if await self.fs.exists(path_with_ext):
                self.tracer.emit("extension_match", path=path_with_ext)
                return path_with_ext
            self.tracer.emit("probe_miss", path=path_with_ext)

        for ext in self.extensions:
            index_path = join_path(candidate, f"index{ext}")
            if await self.fs.exists(index_path):
                self.tracer.emit("index_match", path=index_path)
                return index_path
            self.tracer.emit("probe_miss", path=index_path)

        self.tracer.emit("unresolved", specifier=specifier, path=candidate)
        return candidate


async def resolve_import_path(
    specifier: str,
    current_dir: str,
    fs: FileSystem | None = None,
    config_file_name: str = DEFAULT_CONFIG_FILE_NAME,
    tracer: Tracer = NULL_TRACER,
) -> str:
    """One-off resolution with a fresh resolver and configuration cache."""
    fs = fs or LocalFileSystem()
    loader = AliasConfigLoader(fs, config_file_name=config_file_name, tracer=tracer)
    return await PathResolver(fs, loader, tracer=tracer).resolve(specifier, current_dir)
