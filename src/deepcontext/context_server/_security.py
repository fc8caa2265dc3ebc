"""Path validation for context server tools."""

import os
from pathlib import Path

from ..analysis.filesystem import DirectoryEntry, LocalFileSystem
from ..config import get_config


def get_project_root(project_root: str | None = None) -> Path:
    """Get project root from the argument or configuration.

    Args:
        project_root: Provided project root, if None or "." the configured
            MCP_FILE_ROOT is used

    Returns:
        Resolved project root directory
    """
    if project_root is None or project_root == ".":
        project_root = get_config().project_root
    return Path(project_root).expanduser().resolve()


def validate_tool_path(path: str, project_root: Path) -> Path:
    """Anchor a tool path at the project root and reject anything outside it.

    Args:
        path: Absolute path, or path relative to the project root
        project_root: Root directory of the project

    Returns:
        Validated absolute path

    Raises:
        ValueError: If path is outside project root
    """
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        abs_path = candidate.resolve()
    else:
        abs_path = (project_root / candidate).resolve()

    try:
        abs_path.relative_to(project_root)
    except ValueError:
        raise ValueError(f"Path outside project root: {path}") from None

    return abs_path


class ProjectFileSystem(LocalFileSystem):
    """LocalFileSystem restricted to one project root.

    Paths outside the root (after following symlinks) do not exist for the
    analysis core, and reading or listing them raises PermissionError, which
    the traversal treats as a skipped edge.
    """

    def __init__(self, project_root: Path):
        self.project_root = project_root.resolve()

    def contains(self, path: str) -> bool:
        try:
            Path(os.path.realpath(path)).relative_to(self.project_root)
        except ValueError:
            return False
        return True

    def _check_access(self, path: str) -> None:
        if not self.contains(path):
            raise PermissionError(f"Path outside project root: {path}")

    async def read_text(self, path: str) -> str:
        self._check_access(path)
        return await super().read_text(path)

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        self._check_access(path)
        return await super().list_directory(path)

    async def exists(self, path: str) -> bool:
        return self.contains(path) and await super().exists(path)

    async def is_directory(self, path: str) -> bool:
        return self.contains(path) and await super().is_directory(path)

    def is_file(self, path: str) -> bool:
        return self.contains(path) and os.path.isfile(path)
