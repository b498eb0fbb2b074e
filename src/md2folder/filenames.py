"""Turn document titles into file names."""

from __future__ import annotations

import re
from typing import Iterable

from md2folder.config import (
    MD2FOLDER_FILE_EXTENSION,
    MD2FOLDER_MAX_NAME_BYTES,
    MD2FOLDER_UNTITLED_NAME,
)

# Characters rejected by Windows, macOS or Linux file systems, plus control characters.
_ILLEGAL_CHARS_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f\x7f]')
_WHITESPACE_RE = re.compile(r"\s+")
_NAME_ENCODING = "utf-8"


def truncate_bytes(name: str, max_bytes: int) -> str:
    """Cut ``name`` so its UTF-8 form fits in ``max_bytes``, on a character boundary."""
    encoded = name.encode(_NAME_ENCODING)
    if len(encoded) <= max_bytes:
        return name
    return encoded[: max(max_bytes, 0)].decode(_NAME_ENCODING, errors="ignore").rstrip(" .")


def safe_filename(
    title: str,
    *,
    fallback: str = MD2FOLDER_UNTITLED_NAME,
    max_bytes: int = MD2FOLDER_MAX_NAME_BYTES,
) -> str:
    """Make a title usable as a file name (without extension)."""
    name = _ILLEGAL_CHARS_RE.sub(" ", title)
    name = _WHITESPACE_RE.sub(" ", name).strip(" .")
    name = truncate_bytes(name, max_bytes)
    return name or truncate_bytes(fallback, max_bytes)


def assign_filenames(
    titles: Iterable[str],
    *,
    extension: str = MD2FOLDER_FILE_EXTENSION,
    max_bytes: int = MD2FOLDER_MAX_NAME_BYTES,
) -> list[str]:
    """Give every title a distinct file name, keeping the input order.

    The first occurrence of a name is used as-is; later ones that collide
    (case-insensitively) get " 1", " 2", ... appended. Every returned name,
    suffix and extension included, fits in ``max_bytes`` of UTF-8.
    """
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    budget = max_bytes - len(extension.encode(_NAME_ENCODING))

    taken: set[str] = set()
    names: list[str] = []
    for title in titles:
        base = safe_filename(title, max_bytes=budget)
        candidate = base
        counter = 1
        while candidate.casefold() in taken:
            suffix = f" {counter}"
            stem = truncate_bytes(base, budget - len(suffix.encode(_NAME_ENCODING)))
            candidate = f"{stem}{suffix}"
            counter += 1
        taken.add(candidate.casefold())
        names.append(f"{candidate}{extension}")
    return names
