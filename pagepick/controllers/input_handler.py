import logging
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

from pagepick.core.document import is_pdf_file

logger = logging.getLogger(__name__)


class UserInputHandler:
    """
    Handles keyboard shortcuts and file drops for the main window.
    """
    def __init__(self, main_window):
        """
        Initializes the handler with a reference to the main window.

        Args:
            main_window (MainWindow): A reference to the main application window.
        """
        self.main_window = main_window

    # ===== Keyboard =====

    def handle_key_press(self, event):
        """
        Handles key press events for the main window.
        """
        ctrl = bool(event.modifiers() & Qt.ControlModifier)
        shift = bool(event.modifiers() & Qt.ShiftModifier)

        if event.matches(QKeySequence.Open):
            self.main_window.open_pdf()
            event.accept()
        elif event.matches(QKeySequence.Close):
            self.main_window.close_pdf()
            event.accept()
        elif event.matches(QKeySequence.Save) or (ctrl and event.key() == Qt.Key_E):
            self.main_window.extract_pages()
            event.accept()
        elif ctrl and shift and event.key() == Qt.Key_A:
            self.main_window.deselect_all()
            event.accept()
        elif event.matches(QKeySequence.SelectAll):
            self.main_window.select_all()
            event.accept()
        elif event.matches(QKeySequence.ZoomIn) or (ctrl and event.key() == Qt.Key_Equal):
            self.main_window.zoom_in()
            event.accept()
        elif event.matches(QKeySequence.ZoomOut):
            self.main_window.zoom_out()
            event.accept()
        else:
            event.ignore()

    # ===== Drag and drop =====

    @staticmethod
    def first_local_file(mime_data) -> Optional[str]:
        """
        Get the path of the first local file carried by a drag.

        Args:
            mime_data (QMimeData): Data of the drag or drop event.

        Returns:
            Local file path, or None if the drag carries no file.
        """
        if mime_data is None or not mime_data.hasUrls():
            return None
        for url in mime_data.urls():
            if url.isLocalFile():
                return url.toLocalFile()
        return None

    def handle_drag_enter(self, event):
        """Accept drags that carry a local file."""
        if self.first_local_file(event.mimeData()):
            event.acceptProposedAction()
        else:
            event.ignore()

    def handle_drop(self, event):
        """
        Load the dropped file if it is a PDF; anything else is ignored.
        """
        file_path = self.first_local_file(event.mimeData())
        event.acceptProposedAction()
        self.accept_file(file_path)

    def accept_file(self, file_path: Optional[str]) -> bool:
        """
        Pass a user-chosen file to the window when it is a PDF.

        Args:
            file_path: Path picked or dropped by the user.

        Returns:
            True if the file was handed to the window for loading.
        """
        if not file_path:
            return False
        if not is_pdf_file(file_path):
            logger.info("Ignoring non-PDF file %s", file_path)
            self.main_window.show_status(f"Not a PDF: {file_path}")
            return False

        self.main_window.load_pdf(file_path)
        return True
