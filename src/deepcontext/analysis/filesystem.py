"""File-system capability consumed by the analysis core.

The resolver, discoverer and traversal engine never touch the disk directly;
they go through a ``FileSystem`` instance so callers can substitute their own
implementation (an in-memory tree in tests, a sandboxed view in the server).
"""

import asyncio
import os
from dataclasses import dataclass
from pathlib import Path

import chardet


@dataclass(frozen=True)
class DirectoryEntry:
    """Single entry returned by a directory listing."""

    name: str
    is_directory: bool


def join_path(*segments: str) -> str:
    """Join segments into a normalized path string."""
    return os.path.normpath(os.path.join(*segments))


def parent_directory(path: str) -> str:
    return os.path.dirname(path)


def absolute_path(path: str, cwd: str | None = None) -> str:
    """Resolve ``path`` against ``cwd`` (or the process working directory)."""
    if os.path.isabs(path):
        return os.path.normpath(path)
    return os.path.normpath(os.path.join(cwd or os.getcwd(), path))


def decode_content(raw_content: bytes) -> str:
    """Decode file bytes, detecting the encoding when they are not UTF-8."""
    try:
        return raw_content.decode("utf-8")
    except UnicodeDecodeError:
        pass

    detected_encoding = chardet.detect(raw_content)
    encoding = detected_encoding.get("encoding") or "utf-8"

    try:
        return raw_content.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        # Fallback to utf-8 with error handling
        return raw_content.decode("utf-8", errors="replace")


class FileSystem:
    """Asynchronous file-system primitives used by the analysis core."""

    async def read_text(self, path: str) -> str:
        raise NotImplementedError

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        raise NotImplementedError

    async def exists(self, path: str) -> bool:
        raise NotImplementedError

    async def is_directory(self, path: str) -> bool:
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk.

    Blocking calls run in the default executor so many reads and existence
    checks can be in flight at once on a single event loop.
    """

    async def read_text(self, path: str) -> str:
        raw_content = await asyncio.to_thread(Path(path).read_bytes)
        return decode_content(raw_content)

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        return await asyncio.to_thread(self._scan, path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(_safe_exists, path)

    async def is_directory(self, path: str) -> bool:
        return await asyncio.to_thread(os.path.isdir, path)

    @staticmethod
    def _scan(path: str) -> list[DirectoryEntry]:
        with os.scandir(path) as entries:
            return [
                DirectoryEntry(name=entry.name, is_directory=entry.is_dir(follow_symlinks=False))
                for entry in entries
            ]


def _safe_exists(path: str) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True
