# core/extraction/extraction_worker.py

import logging
from typing import List

from PyQt5.QtCore import QThread, pyqtSignal

from pagepick.core.errors import ExtractionError
from pagepick.core.extraction.page_extractor import extract_pages

logger = logging.getLogger(__name__)


class ExtractionWorker(QThread):
    """Worker thread that builds the output PDF without freezing the UI."""

    # Signals
    succeeded = pyqtSignal(object)  # ExtractionResult
    failed = pyqtSignal(str)  # generic failure message

    def __init__(self, source: bytes, pages: List[int], parent=None):
        super().__init__(parent)
        self.source = source
        self.pages = list(pages)

    def run(self):
        """Execute the extraction in a background thread."""
        try:
            result = extract_pages(self.source, self.pages)
        except Exception:
            logger.exception("Error extracting PDF pages %s", self.pages)
            self.failed.emit(ExtractionError.MESSAGE)
        else:
            self.succeeded.emit(result)
