"""Resolve import tool implementation."""

from dataclasses import asdict
from typing import Any

from ...analysis import CollectingTracer, resolve_import_path
from ...config import get_config
from ...models.analysis_models import ResolveImportResponse
from .._security import ProjectFileSystem, get_project_root, validate_tool_path


async def resolve_import_impl(
    specifier: str,
    from_directory: str = ".",
    project_root: str | None = None,
) -> dict[str, Any]:
    """Resolve a single import specifier and report how it was resolved.

    Args:
        specifier: Import specifier as written in source (e.g. "./utils", "@lib/auth")
        from_directory: Directory of the importing file, relative to the project root
        project_root: Root directory of the project (defaults to MCP_FILE_ROOT)

    Returns:
        Dictionary with the resolved path, whether it exists and the resolution trace
    """
    if not specifier:
        return {"error": {"code": "INVALID_INPUT", "message": "Specifier cannot be empty"}}

    try:
        root = get_project_root(project_root)
        current_dir = validate_tool_path(from_directory, root)
    except ValueError as e:
        return {"error": {"code": "INVALID_INPUT", "message": str(e)}}

    if not current_dir.is_dir():
        return {"error": {"code": "NOT_FOUND", "message": f"Directory does not exist: {from_directory}"}}

    fs = ProjectFileSystem(root)
    tracer = CollectingTracer()
    resolved_path = await resolve_import_path(
        specifier,
        str(current_dir),
        fs=fs,
        config_file_name=get_config().config_file_name,
        tracer=tracer,
    )

    response = ResolveImportResponse(
        specifier=specifier,
        from_directory=str(current_dir),
        resolved_path=resolved_path,
        exists=fs.is_file(resolved_path),
        trace=tracer.as_dicts(),
    )
    return asdict(response)
