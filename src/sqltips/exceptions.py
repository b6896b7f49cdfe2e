"""Custom exceptions for sqltips."""


class SqlTipsError(Exception):
    """Base exception for sqltips operations."""


class FetchError(SqlTipsError):
    """Error during document fetching."""


class DocumentNotFoundError(FetchError):
    """Document does not exist at the given path or URL."""


class InvalidSourceError(SqlTipsError, ValueError):
    """Source string is not a usable path or URL."""


class ParseError(SqlTipsError):
    """Error while reading document content."""


class DocumentAccessError(SqlTipsError):
    """Document exists but cannot be read or written."""
