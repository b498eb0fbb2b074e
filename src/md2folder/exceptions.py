"""Custom exceptions for md2folder."""


class Md2folderError(Exception):
    """Base exception for md2folder operations."""


class SplitError(Md2folderError):
    """Error while splitting a document into sections."""


class ParseError(SplitError):
    """The markdown parser rejected the input."""


class LeadingContentError(SplitError):
    """Content appears before the first top-level heading."""


class ExpansionError(Md2folderError):
    """Error while writing split documents to disk."""


class ConfigurationError(Md2folderError):
    """An option or environment setting has an unusable value."""
