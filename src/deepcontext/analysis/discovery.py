"""Recursive discovery of JavaScript/TypeScript source files."""

import asyncio

from .constants import EXCLUDED_DIRECTORIES, SOURCE_EXTENSIONS
from .filesystem import FileSystem, join_path


def is_source_file(path: str, extensions: tuple[str, ...] = SOURCE_EXTENSIONS) -> bool:
    return path.endswith(extensions)


async def find_source_files(
    fs: FileSystem,
    directory: str,
    excluded_dirs: frozenset[str] = EXCLUDED_DIRECTORIES,
    extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
) -> list[str]:
    """List source files under ``directory``, skipping excluded directory names.

    Ordering is not guaranteed. Errors listing ``directory`` itself propagate.
    """
    files: list[str] = []
    subdirectories: list[str] = []

    for entry in await fs.list_directory(directory):
        path = join_path(directory, entry.name)
        if entry.is_directory:
            if entry.name in excluded_dirs:
                continue
            subdirectories.append(path)
        elif is_source_file(entry.name, extensions):
            files.append(path)

    nested = await asyncio.gather(
        *(find_source_files(fs, subdirectory, excluded_dirs, extensions) for subdirectory in subdirectories)
    )
    for subdirectory_files in nested:
        files.extend(subdirectory_files)
    return files
