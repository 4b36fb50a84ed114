class TextSourceError(Exception):
    """Base exception for reading document text from files."""


class TextExtractionError(TextSourceError):
    """Raised when text cannot be extracted from file content."""


class UnsupportedFileTypeError(TextSourceError):
    """Raised when no text source handles a file's extension."""


class FileValidationError(TextSourceError):
    """Raised when input files fail count, type or size checks."""
