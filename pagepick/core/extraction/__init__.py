"""
Extraction of selected pages into a new PDF.
"""

from .coordinator import ExtractionCoordinator
from .extraction_worker import ExtractionWorker
from .page_extractor import ExtractionResult, extract_pages, output_file_name

__all__ = [
    "ExtractionCoordinator",
    "ExtractionWorker",
    "ExtractionResult",
    "extract_pages",
    "output_file_name",
]
