"""Fixtures for building JavaScript/TypeScript project trees on disk."""

import json
from pathlib import Path
from typing import Any


def create_project_tree(root: str | Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> content) below ``root``.

    Returns:
        The resolved root directory
    """
    root_path = Path(root).resolve()
    for relative_path, content in files.items():
        full_path = root_path / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)
    return root_path


def create_tsconfig(
    directory: str | Path,
    paths: dict[str, list[str]] | None = None,
    base_url: str | None = None,
    extra_options: dict[str, Any] | None = None,
) -> Path:
    """Write a tsconfig.json with the given alias settings."""
    compiler_options: dict[str, Any] = dict(extra_options or {})
    if base_url is not None:
        compiler_options["baseUrl"] = base_url
    if paths is not None:
        compiler_options["paths"] = paths

    config_path = Path(directory) / "tsconfig.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps({"compilerOptions": compiler_options}, indent=2))
    return config_path
