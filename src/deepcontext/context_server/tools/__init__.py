"""Context server tools implementations."""

from typing import Any

from .analyze_imports import analyze_imports_impl
from .list_source_files import list_source_files_impl
from .resolve_import import resolve_import_impl


def register_context_tools(mcp):
    """Register import tracing tools with the MCP server."""

    @mcp.tool
    async def analyze_imports(path: str, depth: int = 0, debug: bool = False) -> dict[str, Any]:
        """Collect a file (or directory) together with the local files it imports.

        Use this tool when:
        - Gathering the source of a component and everything it depends on
        - Building context for a change that touches a file's dependencies
        - Checking which local imports of a file cannot be resolved

        Replaces bash commands: cat on each imported file, grep "from './"

        Args:
            path: File or directory to analyze, relative to the project root
            depth: Import hops to follow; 0 returns only the starting files
            debug: Log every resolution decision on the server

        Example:
            analyze_imports("app/page.tsx", depth=1)
            → {"content": {"/abs/app/page.tsx": "...", "/abs/app/components/Button.tsx": "..."},
               "imports": {"/abs/app/page.tsx": ["/abs/app/components/Button.tsx", ...]}, ...}

        Note: Only imports starting with ".", "/" or "@" are followed. "@" imports are
        rewritten through the nearest tsconfig.json "paths" mapping.
        """
        return await analyze_imports_impl(path=path, depth=depth, debug=debug)

    @mcp.tool
    async def resolve_import(specifier: str, from_directory: str = ".") -> dict[str, Any]:
        """Resolve one import specifier to a file path.

        Probes the exact path, then .tsx, .ts, .jsx and .js, then index files,
        after applying tsconfig path aliases for "@" specifiers.

        Args:
            specifier: Import specifier as written in source (e.g. "./utils", "@lib/auth")
            from_directory: Directory of the importing file, relative to the project root
        """
        return await resolve_import_impl(specifier=specifier, from_directory=from_directory)

    @mcp.tool
    async def list_source_files(directory: str = ".") -> dict[str, Any]:
        """List .js, .jsx, .ts and .tsx files below a directory (node_modules, .git, dist skipped).

        Args:
            directory: Directory to scan, relative to the project root
        """
        return await list_source_files_impl(directory=directory)


__all__ = [
    "analyze_imports_impl",
    "list_source_files_impl",
    "register_context_tools",
    "resolve_import_impl",
]
