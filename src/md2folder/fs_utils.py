"""Filesystem helpers that run blocking calls in a thread pool."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a whole text file without blocking the event loop."""
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(
    path: Path, content: str, encoding: str = "utf-8", exclusive: bool = False
) -> None:
    """Write text to a file asynchronously using a thread pool.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
        exclusive: If True, fail with FileExistsError instead of replacing
            an existing file.
    """
    await asyncio.to_thread(_write_text, path, content, encoding, exclusive)


def _write_text(path: Path, content: str, encoding: str, exclusive: bool) -> None:
    with path.open("x" if exclusive else "w", encoding=encoding) as handle:
        handle.write(content)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> bool:
    """Create a directory in a thread pool.

    Returns:
        True if this call created the directory, False if it already existed
        (only possible with ``exist_ok``).
    """
    return await asyncio.to_thread(_mkdir, path, parents, exist_ok)


def _mkdir(path: Path, parents: bool, exist_ok: bool) -> bool:
    existed = path.is_dir()
    path.mkdir(parents=parents, exist_ok=exist_ok)
    return not existed


async def remove_files_async(paths: list[Path], folder: Path | None = None) -> None:
    """Delete ``paths`` (missing ones are skipped), then the now empty ``folder``."""
    await asyncio.to_thread(_remove_files, paths, folder)


def _remove_files(paths: list[Path], folder: Path | None) -> None:
    for path in paths:
        path.unlink(missing_ok=True)
    if folder is not None:
        folder.rmdir()
