"""
Thumbnail grid for the loaded document.
"""

import logging
from typing import Dict, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QApplication, QGridLayout, QWidget

from pagepick.config import DEFAULT_COLUMNS, DEFAULT_ZOOM, GRID_SPACING
from pagepick.core.document import PDFDocument
from pagepick.core.selection import SelectionStore
from pagepick.ui.widgets.page_thumbnail import PageThumbnail

logger = logging.getLogger(__name__)


class PageGrid(QWidget):
    """
    Shows every page of a document as a clickable thumbnail.

    Rendering is delegated to the document; layout follows the zoom and
    column count pushed in by the window.
    """

    # Signals
    page_clicked = pyqtSignal(int)  # page number
    document_loaded = pyqtSignal(int)  # page count

    def __init__(self, selection: SelectionStore, parent=None):
        super().__init__(parent)

        self.selection = selection
        self.document: Optional[PDFDocument] = None
        self.zoom = DEFAULT_ZOOM
        self.columns = DEFAULT_COLUMNS
        self.thumbnails: Dict[int, PageThumbnail] = {}

        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(16, 16, 16, 96)
        self._layout.setSpacing(GRID_SPACING)
        self._layout.setAlignment(Qt.AlignTop | Qt.AlignHCenter)

        self.selection.selection_changed.connect(self._on_selection_changed)

    # ===== Document =====

    def set_document(self, document: Optional[PDFDocument]):
        """Replace the shown document and build one tile per page."""
        self.clear()
        self.document = document
        if document is None:
            return

        for page_number in range(1, document.page_count + 1):
            thumb = PageThumbnail(page_number, self)
            thumb.set_page_pixmap(document.render_page(page_number, self.zoom))
            thumb.set_selected(self.selection.is_selected(page_number))
            thumb.clicked.connect(self.page_clicked)
            self.thumbnails[page_number] = thumb
            # Keep the window responsive on long documents
            QApplication.processEvents()
            if self.document is not document:
                # Replaced or closed while events were processed
                return

        self._relayout()
        logger.debug("Built %d thumbnails for %s", len(self.thumbnails), document.name)
        self.document_loaded.emit(document.page_count)

    def clear(self):
        """Remove every tile."""
        while self.thumbnails:
            _, thumb = self.thumbnails.popitem()
            self._layout.removeWidget(thumb)
            try:
                thumb.clicked.disconnect()
            except (TypeError, RuntimeError):
                pass
            thumb.setParent(None)
            thumb.deleteLater()
        self.document = None

    @property
    def page_count(self) -> int:
        return self.document.page_count if self.document else 0

    # ===== View =====

    def set_zoom(self, zoom: float):
        """Re-render every tile at a new scale."""
        self.zoom = zoom
        if self.document is None:
            return
        for page_number, thumb in self.thumbnails.items():
            thumb.set_page_pixmap(self.document.render_page(page_number, zoom))
        self._relayout()

    def set_columns(self, columns: int):
        self.columns = columns
        self._relayout()

    def _relayout(self):
        for thumb in self.thumbnails.values():
            self._layout.removeWidget(thumb)

        for page_number in sorted(self.thumbnails):
            row, col = divmod(page_number - 1, self.columns)
            self._layout.addWidget(
                self.thumbnails[page_number], row, col, Qt.AlignTop | Qt.AlignHCenter
            )
            self.thumbnails[page_number].show()

        self.updateGeometry()

    # ===== Selection =====

    def _on_selection_changed(self, _count: int):
        for page_number, thumb in self.thumbnails.items():
            thumb.set_selected(self.selection.is_selected(page_number))
