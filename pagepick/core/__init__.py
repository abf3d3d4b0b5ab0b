"""
Core logic for the PDF Page Extractor.
"""

from .document import PDFDocument, is_pdf_file
from .errors import DocumentLoadError, ExtractionError, PagePickError
from .selection import SelectionStore
from .extraction import ExtractionCoordinator, ExtractionResult

__all__ = [
    "PDFDocument",
    "is_pdf_file",
    "SelectionStore",
    "ExtractionCoordinator",
    "ExtractionResult",
    "PagePickError",
    "DocumentLoadError",
    "ExtractionError",
]
