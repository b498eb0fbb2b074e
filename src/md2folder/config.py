"""Local configuration for md2folder."""

from __future__ import annotations

import os


DEFAULT_LEADING_CONTENT = "discard"
DEFAULT_FILE_EXTENSION = ".md"
DEFAULT_ENCODING = "utf-8"
DEFAULT_UNTITLED_NAME = "Untitled"
DEFAULT_MAX_NAME_BYTES = 255

# What to do with blocks that precede the first top-level heading: "discard" or "reject".
MD2FOLDER_LEADING_CONTENT = os.getenv("MD2FOLDER_LEADING_CONTENT", DEFAULT_LEADING_CONTENT)
MD2FOLDER_FILE_EXTENSION = os.getenv("MD2FOLDER_FILE_EXTENSION", DEFAULT_FILE_EXTENSION)
MD2FOLDER_ENCODING = os.getenv("MD2FOLDER_ENCODING", DEFAULT_ENCODING)
MD2FOLDER_UNTITLED_NAME = os.getenv("MD2FOLDER_UNTITLED_NAME", DEFAULT_UNTITLED_NAME)
# Most file systems cap a single path component at 255 bytes, extension included.
MD2FOLDER_MAX_NAME_BYTES = int(os.getenv("MD2FOLDER_MAX_NAME_BYTES", str(DEFAULT_MAX_NAME_BYTES)))
