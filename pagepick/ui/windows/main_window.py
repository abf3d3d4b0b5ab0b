"""
Main application window for the PDF Page Extractor.
"""

import logging
from typing import Optional

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtWidgets import (
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pagepick.config import MIN_WINDOW_SIZE, WINDOW_TITLE
from pagepick.controllers import UserInputHandler, ViewController
from pagepick.core.document import PDFDocument
from pagepick.core.errors import DocumentLoadError
from pagepick.core.extraction import ExtractionCoordinator, ExtractionResult
from pagepick.core.selection import SelectionStore
from pagepick.styles import ThemeManager
from pagepick.ui.widgets import PageGrid, UploadArea, ViewerToolbar
from pagepick.utils import suggested_save_path

logger = logging.getLogger(__name__)

UPLOAD_PAGE = 0
VIEWER_PAGE = 1
STATUS_TIMEOUT_MS = 4000


def extract_button_text(selected_count: int, busy: bool) -> str:
    if busy:
        return "Extracting..."
    plural = "s" if selected_count != 1 else ""
    return f"Extract {selected_count} Page{plural}"


class MainWindow(QMainWindow):
    """Upload screen, thumbnail grid and the extract action."""

    def __init__(self, file_path: Optional[str] = None):
        super().__init__()

        self._init_core_components()
        self._init_controllers()

        self._setup_window()
        self._setup_ui()
        self._setup_connections()

        ThemeManager.apply_theme(self)

        if file_path:
            self.input_handler.accept_file(file_path)

    def _init_core_components(self):
        """Initialize core state."""
        self.document: Optional[PDFDocument] = None
        self.page_count = 0
        self.selection = SelectionStore(self)
        self.extraction = ExtractionCoordinator(self)

    def _init_controllers(self):
        """Initialize application controllers."""
        self.input_handler = UserInputHandler(self)
        self.view_controller = ViewController()

    def _setup_window(self):
        """Setup main window properties."""
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(*MIN_WINDOW_SIZE)
        self.setAcceptDrops(True)

    def _setup_ui(self):
        """Setup the user interface."""
        self._create_header()

        self.stack = QStackedWidget()
        self.stack.addWidget(self._create_upload_page())
        self.stack.addWidget(self._create_viewer_page())

        main_layout = QVBoxLayout()
        main_layout.setSpacing(0)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self.header_frame)
        main_layout.addWidget(self.stack)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        # Floating extract button, positioned in resizeEvent
        self.extract_button = QPushButton(extract_button_text(0, False), container)
        self.extract_button.setObjectName("ExtractButton")
        self.extract_button.setCursor(Qt.PointingHandCursor)
        self.extract_button.hide()

        self._update_extract_button()
        QTimer.singleShot(0, self._update_floating_positions)

    def _create_header(self):
        """Create the title bar."""
        self.header_frame = QFrame()
        self.header_frame.setObjectName("HeaderFrame")
        layout = QHBoxLayout(self.header_frame)
        layout.setContentsMargins(24, 14, 24, 14)
        layout.setSpacing(12)

        title = QLabel(WINDOW_TITLE, self.header_frame)
        title.setObjectName("HeaderTitle")
        layout.addWidget(title)

        layout.addStretch(1)

        self.file_name_label = QLabel("", self.header_frame)
        self.file_name_label.setObjectName("statusLabel")
        layout.addWidget(self.file_name_label)

    def _create_upload_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setAlignment(Qt.AlignHCenter | Qt.AlignTop)

        self.upload_area = UploadArea(page)
        layout.addWidget(self.upload_area, 0, Qt.AlignHCenter)
        return page

    def _create_viewer_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setSpacing(0)
        layout.setContentsMargins(0, 0, 0, 0)

        self.viewer_toolbar = ViewerToolbar(self.view_controller, page)
        layout.addWidget(self.viewer_toolbar)

        self.page_grid = PageGrid(self.selection)
        self.scroll_area = QScrollArea(page)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.page_grid)
        layout.addWidget(self.scroll_area)
        return page

    def _setup_connections(self):
        """Setup signal/slot connections."""
        self.upload_area.browse_requested.connect(self.open_pdf)

        self.view_controller.zoom_changed.connect(self.page_grid.set_zoom)
        self.view_controller.columns_changed.connect(self.page_grid.set_columns)

        controls = self.viewer_toolbar.selection_controls
        controls.select_all_requested.connect(self.select_all)
        controls.deselect_all_requested.connect(self.deselect_all)

        self.page_grid.page_clicked.connect(self.toggle_page)
        self.page_grid.document_loaded.connect(self._on_pages_loaded)
        self.selection.selection_changed.connect(self._on_selection_changed)

        self.extraction.busy_changed.connect(self._on_busy_changed)
        self.extraction.extraction_finished.connect(self._on_extraction_finished)
        self.extraction.extraction_failed.connect(self._on_extraction_failed)

        self.extract_button.clicked.connect(lambda: self.extract_pages())

    # ===== Document Management =====

    def open_pdf(self):
        """Open a PDF file dialog."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open PDF", "", "PDF Files (*.pdf)"
        )
        if file_path:
            self.input_handler.accept_file(file_path)

    def load_pdf(self, file_path: str) -> bool:
        """
        Load a PDF file from disk, replacing the current document.

        Args:
            file_path: Path to the PDF file

        Returns:
            True if the document was loaded
        """
        try:
            document = PDFDocument.from_path(file_path)
        except DocumentLoadError as e:
            logger.exception("Error loading PDF %s", file_path)
            QMessageBox.critical(self, "Error", f"Error loading PDF: {e}")
            return False

        self.set_document(document)
        return True

    def set_document(self, document: PDFDocument):
        """Show a loaded document; any previous selection is dropped."""
        if self.document is not None:
            self.document.close()

        self.document = document
        self.page_count = 0
        self.selection.reset()

        logger.info("Loaded %s (%d pages)", document.name, document.page_count)
        self.file_name_label.setText(document.name)
        self.stack.setCurrentIndex(VIEWER_PAGE)
        self.scroll_area.verticalScrollBar().setValue(0)

        self.page_grid.set_document(document)
        self._update_extract_button()

    def close_pdf(self):
        """Close the current document and return to the upload screen."""
        if self.document is None:
            return

        self.page_grid.clear()
        self.document.close()
        self.document = None
        self.page_count = 0
        self.selection.reset()

        self.file_name_label.setText("")
        self.stack.setCurrentIndex(UPLOAD_PAGE)
        self._update_extract_button()

    # ===== Selection =====

    def toggle_page(self, page_number: int):
        self.selection.toggle(page_number)

    def select_all(self):
        if self.document is None:
            return
        self.selection.select_all(self.page_count)

    def deselect_all(self):
        self.selection.deselect_all()

    # ===== View =====

    def zoom_in(self):
        self.view_controller.zoom_in()

    def zoom_out(self):
        self.view_controller.zoom_out()

    # ===== Extraction =====

    def extract_pages(self) -> bool:
        """Start extracting the selected pages; ignored while one is running."""
        return self.extraction.request_extraction(self.document, self.selection)

    def save_extraction(self, result: ExtractionResult) -> Optional[str]:
        """
        Ask where to save an extraction result and write it.

        Returns:
            The path written, or None if cancelled or failed
        """
        output_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Extracted Pages",
            suggested_save_path(result.file_name),
            "PDF Files (*.pdf)",
        )
        if not output_path:
            return None

        try:
            result.save(output_path)
        except OSError as e:
            logger.exception("Error saving %s", output_path)
            QMessageBox.critical(self, "Error", f"Could not save PDF: {e}")
            return None

        self.show_status(f"Saved {result.page_count} page(s) to {output_path}")
        return output_path

    def _on_extraction_finished(self, result: ExtractionResult):
        self.save_extraction(result)

    def _on_extraction_failed(self, message: str):
        QMessageBox.warning(self, "Extraction Failed", message)

    def _on_busy_changed(self, busy: bool):
        self._update_extract_button()

    # ===== UI State =====

    def show_status(self, message: str):
        """Show a transient note in the status bar."""
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def _on_pages_loaded(self, page_count: int):
        if self.document is None or page_count != self.document.page_count:
            return
        self.page_count = page_count
        self._on_selection_changed(len(self.selection))

    def _on_selection_changed(self, selected_count: int):
        self.viewer_toolbar.selection_controls.update_counts(
            selected_count, self.page_count
        )
        self._update_extract_button()

    def _update_extract_button(self):
        busy = self.extraction.is_busy()
        count = len(self.selection)

        self.extract_button.setVisible(self.document is not None)
        self.extract_button.setText(extract_button_text(count, busy))
        self.extract_button.setEnabled(count > 0 and not busy)
        self.extract_button.adjustSize()
        self._update_floating_positions()

    def _update_floating_positions(self):
        """Pin the extract button to the bottom-right corner."""
        container = self.centralWidget()
        if container is None:
            return
        margin = 24
        x = container.width() - self.extract_button.width() - margin
        y = container.height() - self.extract_button.height() - margin
        self.extract_button.move(max(0, x), max(0, y))
        self.extract_button.raise_()

    # ===== Events =====

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._update_floating_positions()

    def keyPressEvent(self, event):
        self.input_handler.handle_key_press(event)
        if not event.isAccepted():
            super().keyPressEvent(event)

    def dragEnterEvent(self, event):
        self.input_handler.handle_drag_enter(event)

    def dragMoveEvent(self, event):
        self.input_handler.handle_drag_enter(event)

    def dropEvent(self, event):
        self.input_handler.handle_drop(event)

    def closeEvent(self, event):
        # Let an in-flight extraction finish before the thread is destroyed
        self.extraction.wait()
        if self.document is not None:
            self.document.close()
        super().closeEvent(event)
