"""
Exception types raised by the core layer.
"""


class PagePickError(Exception):
    """Base class for application errors."""


class DocumentLoadError(PagePickError):
    """The source file could not be opened as a PDF."""


class ExtractionError(PagePickError):
    """Building the output document failed."""

    MESSAGE = "Extraction failed"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)
