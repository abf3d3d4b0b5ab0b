"""
Single-flight coordination of page extraction.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from pagepick.core.document import PDFDocument
from pagepick.core.extraction.extraction_worker import ExtractionWorker
from pagepick.core.extraction.page_extractor import ExtractionResult
from pagepick.core.selection import SelectionStore

logger = logging.getLogger(__name__)


class ExtractionCoordinator(QObject):
    """
    Runs at most one extraction at a time.

    A request made while another is pending, without a document, or with
    an empty selection is ignored. The busy flag is advisory: the UI reads
    it to disable the extract action.
    """

    # Signals
    busy_changed = pyqtSignal(bool)
    extraction_finished = pyqtSignal(object)  # ExtractionResult
    extraction_failed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._busy = False
        self._worker: Optional[ExtractionWorker] = None

    @property
    def busy(self) -> bool:
        return self._busy

    def is_busy(self) -> bool:
        return self._busy

    @property
    def worker(self) -> Optional[ExtractionWorker]:
        """The in-flight worker thread, if any."""
        return self._worker

    def request_extraction(
        self, document: Optional[PDFDocument], selection: SelectionStore
    ) -> bool:
        """
        Start extracting the selected pages of a document.

        Args:
            document: The loaded source document
            selection: Current page selection

        Returns:
            True if an extraction was started
        """
        if document is None or selection.is_empty() or self._busy:
            return False

        pages = selection.sorted_pages
        logger.info("Extracting %d page(s) from %s", len(pages), document.name)

        self._set_busy(True)

        worker = ExtractionWorker(document.data, pages)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(self._on_thread_finished)
        self._worker = worker
        worker.start()
        return True

    def wait(self, msecs: int = -1) -> bool:
        """Block until the in-flight worker thread (if any) has finished."""
        if self._worker is None:
            return True
        if msecs < 0:
            return self._worker.wait()
        return self._worker.wait(msecs)

    # ===== Worker Signal Handlers =====

    def _on_succeeded(self, result: ExtractionResult):
        logger.info("Extraction produced %s (%d bytes)", result.file_name, len(result.data))
        self._set_busy(False)
        self.extraction_finished.emit(result)

    def _on_failed(self, message: str):
        self._set_busy(False)
        self.extraction_failed.emit(message)

    def _on_thread_finished(self):
        worker = self.sender()
        if worker is self._worker:
            self._worker = None
        if worker is not None:
            worker.deleteLater()

    def _set_busy(self, busy: bool):
        if self._busy != busy:
            self._busy = busy
            self.busy_changed.emit(busy)
