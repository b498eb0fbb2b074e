"""Expand a Markdown file into a folder of per-section documents."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from md2folder.config import (
    MD2FOLDER_ENCODING,
    MD2FOLDER_FILE_EXTENSION,
    MD2FOLDER_LEADING_CONTENT,
)
from md2folder.exceptions import ConfigurationError, ExpansionError
from md2folder.filenames import assign_filenames
from md2folder.fs_utils import (
    mkdir_async,
    read_text_async,
    remove_files_async,
    write_text_async,
)
from md2folder.schemas import ExpansionResult
from md2folder.splitter import LEADING_CONTENT_POLICIES, split_markdown

logger = logging.getLogger(__name__)


@dataclass
class ExpansionOptions:
    """Options for expanding a file into a folder.

    Attributes:
        leading_content: Policy for blocks before the first level-1 heading
            ("discard" or "reject").
        exist_ok: If True, write into the folder even when it already exists.
        overwrite: If True, replace files that already exist in the folder.
        dry_run: If True, compute the result without touching the filesystem.
        extension: File extension for written documents.
        encoding: Text encoding for reading the source and writing documents.
    """

    leading_content: str = MD2FOLDER_LEADING_CONTENT
    exist_ok: bool = False
    overwrite: bool = False
    dry_run: bool = False
    extension: str = MD2FOLDER_FILE_EXTENSION
    encoding: str = MD2FOLDER_ENCODING

    def __post_init__(self) -> None:
        if self.leading_content not in LEADING_CONTENT_POLICIES:
            raise ConfigurationError(
                f"Unknown leading content policy {self.leading_content!r}; "
                f"expected one of {', '.join(LEADING_CONTENT_POLICIES)}"
            )


def folder_for(source: Path, output_dir: Path | None = None) -> Path:
    """Folder that receives the documents split out of ``source``."""
    return (output_dir or source.parent) / source.stem


async def expand_to_folder(
    source: Path,
    *,
    output_dir: Path | None = None,
    options: ExpansionOptions | None = None,
) -> ExpansionResult:
    """Split ``source`` at its level-1 headings and write one file per section.

    The folder is named after the source file's base name and is created
    before any document is written. Documents are then written concurrently.
    If a write fails and this call created the folder, the folder and the
    files already written to it are removed again.

    Args:
        source: Markdown file to expand.
        output_dir: Parent directory for the new folder. Defaults to the
            directory containing ``source``.
        options: Expansion options. Uses defaults if None.

    Returns:
        The folder, the file paths and the documents written to them.

    Raises:
        ExpansionError: If the source cannot be read, or the folder or a file
            cannot be created.
        SplitError: If the source cannot be split.
    """
    opts = options or ExpansionOptions()
    source = Path(source)
    folder = folder_for(source, Path(output_dir) if output_dir else None)

    try:
        text = await read_text_async(source, encoding=opts.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ExpansionError(f"Could not read {source}: {exc}") from exc

    documents = split_markdown(text, leading_content=opts.leading_content)
    names = assign_filenames(
        (document.title for document in documents), extension=opts.extension
    )
    result = ExpansionResult(
        source=source,
        folder=folder,
        files=[folder / name for name in names],
        documents=documents,
        dry_run=opts.dry_run,
    )

    if opts.dry_run:
        logger.info("Dry run: %s would expand into %d document(s)", source, len(documents))
        return result

    try:
        created = await mkdir_async(folder, parents=True, exist_ok=opts.exist_ok)
    except FileExistsError as exc:
        if folder.is_dir():
            raise ExpansionError(f"Folder already exists: {folder}") from exc
        raise ExpansionError(f"A file is in the way of folder {folder}") from exc
    except OSError as exc:
        raise ExpansionError(f"Could not create folder {folder}: {exc}") from exc

    outcomes = await asyncio.gather(
        *(
            _write_document(path, document.content, opts)
            for path, document in zip(result.files, documents)
        ),
        return_exceptions=True,
    )
    failures = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
    if failures:
        if created:
            written = [path for path, outcome in zip(result.files, outcomes) if outcome is None]
            await _discard_partial_expansion(folder, written)
        raise failures[0]

    logger.info("Expanded %s into %d document(s) under %s", source, len(documents), folder)
    return result


async def _discard_partial_expansion(folder: Path, written: list[Path]) -> None:
    """Remove a folder this run created, so a failed expansion can be retried."""
    try:
        await remove_files_async(written, folder)
    except OSError as exc:
        logger.warning("Could not clean up %s after a failed expansion: %s", folder, exc)
    else:
        logger.debug("Removed partially written folder %s", folder)


async def _write_document(path: Path, content: str, opts: ExpansionOptions) -> None:
    try:
        await write_text_async(
            path, content, encoding=opts.encoding, exclusive=not opts.overwrite
        )
    except FileExistsError as exc:
        raise ExpansionError(f"File already exists: {path}") from exc
    except OSError as exc:
        raise ExpansionError(f"Could not write {path}: {exc}") from exc
    logger.debug("Wrote %s", path)
