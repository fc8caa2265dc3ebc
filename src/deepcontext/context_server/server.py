"""Context MCP Server - Local import tracing tools."""

import logging

from fastmcp import FastMCP

from ..config import get_config
from .tools import register_context_tools

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Initialize the Context MCP server
mcp = FastMCP(
    name="DeepContext Server",
    version=__version__,
    instructions="""
        Context server traces local JavaScript/TypeScript imports:

        Core Tools:
        - analyze_imports: Return a file plus the local files it imports, up to a depth
        - resolve_import: Resolve a single import specifier to a file path
        - list_source_files: List source files below a directory

        All tools support:
        - Relative imports and tsconfig.json "paths" aliases
        - Extension probing (.tsx, .ts, .jsx, .js) and index files
        - Paths relative to the project root (MCP_FILE_ROOT)

        Best Practices:
        - Start with depth 0 or 1 and increase only when needed
        - Use resolve_import to debug an import that analyze_imports cannot follow
    """,
)

# Register all context tools
register_context_tools(mcp)


def main():
    """Entry point for the context server."""
    config = get_config()
    logging.basicConfig(
        level=logging.DEBUG if config.debug_mode else getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info("Starting context server with project root: %s", config.project_root)
    mcp.run()


if __name__ == "__main__":
    main()
