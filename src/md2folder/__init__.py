"""md2folder: split Markdown documents into a folder of sections."""

from md2folder.exceptions import (
    ConfigurationError,
    ExpansionError,
    LeadingContentError,
    Md2folderError,
    ParseError,
    SplitError,
)
from md2folder.expansion import ExpansionOptions, expand_to_folder
from md2folder.schemas import ExpansionResult, SplitDocument
from md2folder.splitter import split_markdown

__all__ = [
    "ConfigurationError",
    "ExpansionError",
    "ExpansionOptions",
    "ExpansionResult",
    "LeadingContentError",
    "Md2folderError",
    "ParseError",
    "SplitDocument",
    "SplitError",
    "expand_to_folder",
    "split_markdown",
]
