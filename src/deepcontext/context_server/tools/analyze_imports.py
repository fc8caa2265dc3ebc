"""Analyze imports tool implementation."""

import logging
from dataclasses import asdict
from typing import Any

from ...analysis import analyze_imports
from ...config import get_config
from ...models.analysis_models import AnalyzeImportsResponse
from .._security import ProjectFileSystem, get_project_root, validate_tool_path

logger = logging.getLogger(__name__)


async def analyze_imports_impl(
    path: str,
    depth: int = 0,
    debug: bool = False,
    project_root: str | None = None,
) -> dict[str, Any]:
    """Trace local imports from a file or directory.

    Args:
        path: File or directory to analyze, relative to the project root
        depth: Number of import hops to follow (0 = starting files only)
        debug: Whether to log every resolution decision
        project_root: Root directory of the project (defaults to MCP_FILE_ROOT)

    Returns:
        Dictionary with file contents, resolved imports and summary fields
    """
    config = get_config()

    if not 0 <= depth <= config.max_depth_limit:
        return {
            "error": {
                "code": "INVALID_INPUT",
                "message": f"Depth must be between 0 and {config.max_depth_limit}, got: {depth}",
            }
        }

    try:
        root = get_project_root(project_root)
        target = validate_tool_path(path, root)
    except ValueError as e:
        return {"error": {"code": "INVALID_INPUT", "message": str(e)}}

    if not target.exists():
        return {"error": {"code": "NOT_FOUND", "message": f"Path does not exist: {path}"}}

    fs = ProjectFileSystem(root)
    try:
        result = await analyze_imports(
            str(target),
            depth,
            debug or config.debug_mode,
            fs=fs,
            config_file_name=config.config_file_name,
            max_alias_rewrites=config.max_alias_rewrites,
        )
    except OSError as e:
        logger.error("Import analysis failed for %s: %s", target, e)
        return {"error": {"code": "OPERATION_FAILED", "message": f"Failed to analyze imports: {str(e)}"}}

    unresolved = sorted(
        {import_path for paths in result.imports.values() for import_path in paths if not fs.is_file(import_path)}
    )

    response = AnalyzeImportsResponse(
        content=result.content,
        imports=result.imports,
        total_files=len(result.content),
        max_depth=depth,
        unresolved_imports=unresolved,
    )
    return asdict(response)
