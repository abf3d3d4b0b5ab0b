"""Unit tests for UserInputHandler."""
from unittest.mock import MagicMock

import pytest
from PyQt5.QtCore import QMimeData, QUrl

from pagepick.controllers import UserInputHandler


class TestUserInputHandler:
    """Test suite for the file input boundary."""

    @pytest.fixture
    def window(self):
        return MagicMock()

    @pytest.fixture
    def handler(self, window):
        return UserInputHandler(window)

    def test_pdf_is_loaded(self, handler, window):
        assert handler.accept_file("/docs/report.pdf") is True
        window.load_pdf.assert_called_once_with("/docs/report.pdf")

    def test_non_pdf_is_ignored(self, handler, window):
        assert handler.accept_file("/docs/notes.txt") is False
        window.load_pdf.assert_not_called()
        window.show_status.assert_called_once()

    def test_empty_path_is_ignored(self, handler, window):
        assert handler.accept_file("") is False
        assert handler.accept_file(None) is False
        window.load_pdf.assert_not_called()
        window.show_status.assert_not_called()

    def test_first_local_file(self, qapp):
        mime = QMimeData()
        mime.setUrls([
            QUrl("https://example.com/remote.pdf"),
            QUrl.fromLocalFile("/tmp/first.pdf"),
            QUrl.fromLocalFile("/tmp/second.pdf"),
        ])

        assert UserInputHandler.first_local_file(mime) == "/tmp/first.pdf"

    def test_first_local_file_without_urls(self, qapp):
        mime = QMimeData()
        mime.setText("just text")

        assert UserInputHandler.first_local_file(mime) is None
        assert UserInputHandler.first_local_file(None) is None

    def test_drop_of_pdf_loads_it(self, qapp, handler, window):
        mime = QMimeData()
        mime.setUrls([QUrl.fromLocalFile("/tmp/dropped.pdf")])
        event = MagicMock()
        event.mimeData.return_value = mime

        handler.handle_drop(event)

        window.load_pdf.assert_called_once_with("/tmp/dropped.pdf")

    def test_drop_of_image_is_ignored(self, qapp, handler, window):
        mime = QMimeData()
        mime.setUrls([QUrl.fromLocalFile("/tmp/photo.png")])
        event = MagicMock()
        event.mimeData.return_value = mime

        handler.handle_drop(event)

        window.load_pdf.assert_not_called()

    def test_drag_without_files_rejected(self, qapp, handler):
        mime = QMimeData()
        mime.setText("hello")
        event = MagicMock()
        event.mimeData.return_value = mime

        handler.handle_drag_enter(event)

        event.ignore.assert_called_once()
        event.acceptProposedAction.assert_not_called()
