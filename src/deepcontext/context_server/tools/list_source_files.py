"""List source files tool implementation."""

from dataclasses import asdict
from typing import Any

from ...analysis import find_source_files
from ...models.analysis_models import ListSourceFilesResponse
from .._security import ProjectFileSystem, get_project_root, validate_tool_path


async def list_source_files_impl(directory: str = ".", project_root: str | None = None) -> dict[str, Any]:
    """List JavaScript/TypeScript files below a directory.

    node_modules, .git and dist directories are skipped.
    """
    try:
        root = get_project_root(project_root)
        target = validate_tool_path(directory, root)
    except ValueError as e:
        return {"error": {"code": "INVALID_INPUT", "message": str(e)}}

    if not target.is_dir():
        return {"error": {"code": "NOT_FOUND", "message": f"Directory does not exist: {directory}"}}

    try:
        files = sorted(await find_source_files(ProjectFileSystem(root), str(target)))
    except OSError as e:
        return {"error": {"code": "OPERATION_FAILED", "message": f"Failed to list source files: {str(e)}"}}

    return asdict(ListSourceFilesResponse(files=files, total=len(files)))
