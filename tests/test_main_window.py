"""Integration tests for MainWindow wiring, run offscreen."""
from unittest.mock import MagicMock, patch

import pytest

from pagepick.core.document import PDFDocument
from pagepick.ui.widgets import page_grid as page_grid_module
from pagepick.ui.windows import main_window as main_window_module
from pagepick.ui.windows.main_window import (
    UPLOAD_PAGE,
    VIEWER_PAGE,
    MainWindow,
    extract_button_text,
)
from tests.conftest import make_pdf, page_width, page_widths, wait_until_idle


def test_extract_button_text():
    assert extract_button_text(0, False) == "Extract 0 Pages"
    assert extract_button_text(1, False) == "Extract 1 Page"
    assert extract_button_text(3, False) == "Extract 3 Pages"
    assert extract_button_text(3, True) == "Extracting..."


class TestMainWindow:
    """Test suite for the main window."""

    @pytest.fixture
    def window(self, qapp):
        window = MainWindow()
        yield window
        wait_until_idle(window.extraction)
        window.close()
        window.deleteLater()
        qapp.processEvents()

    @pytest.fixture
    def loaded(self, window):
        window.set_document(PDFDocument.from_bytes(make_pdf(6), name="six.pdf"))
        return window

    def test_starts_on_upload_screen(self, window):
        assert window.stack.currentIndex() == UPLOAD_PAGE
        assert window.document is None
        assert window.extract_button.isHidden()

    def test_loading_shows_thumbnails(self, loaded):
        assert loaded.stack.currentIndex() == VIEWER_PAGE
        assert loaded.page_count == 6
        assert sorted(loaded.page_grid.thumbnails) == [1, 2, 3, 4, 5, 6]
        assert loaded.file_name_label.text() == "six.pdf"

    def test_toggle_updates_tiles_and_button(self, loaded):
        loaded.toggle_page(4)
        loaded.page_grid.thumbnails[2].clicked.emit(2)

        assert loaded.selection.sorted_pages == [2, 4]
        assert loaded.page_grid.thumbnails[4].selected
        assert not loaded.page_grid.thumbnails[1].selected
        assert loaded.extract_button.text() == "Extract 2 Pages"
        assert loaded.extract_button.isEnabled()
        summary = loaded.viewer_toolbar.selection_controls.summary_label.text()
        assert summary == "2 of 6 pages selected"

    def test_select_all_and_deselect_all(self, loaded):
        loaded.select_all()
        assert loaded.selection.sorted_pages == [1, 2, 3, 4, 5, 6]
        assert loaded.viewer_toolbar.selection_controls.deselect_all_button.isEnabled()

        loaded.deselect_all()
        assert loaded.selection.is_empty()
        assert not loaded.extract_button.isEnabled()
        assert not loaded.viewer_toolbar.selection_controls.deselect_all_button.isEnabled()

    def test_new_document_resets_selection(self, loaded):
        loaded.select_all()
        loaded.set_document(PDFDocument.from_bytes(make_pdf(2), name="two.pdf"))

        assert loaded.selection.is_empty()
        assert loaded.page_count == 2
        assert sorted(loaded.page_grid.thumbnails) == [1, 2]

    def test_close_returns_to_upload(self, loaded):
        loaded.toggle_page(1)
        loaded.close_pdf()

        assert loaded.stack.currentIndex() == UPLOAD_PAGE
        assert loaded.document is None
        assert loaded.selection.is_empty()
        assert loaded.page_grid.thumbnails == {}

    def _interrupt_first_build_step(self, action):
        """Run `action` once from inside the grid's event pump."""
        calls = []

        def pump():
            if not calls:
                calls.append(True)
                action()

        fake_app = MagicMock()
        fake_app.processEvents.side_effect = pump
        return patch.object(page_grid_module, "QApplication", fake_app)

    def test_replacing_document_while_grid_builds(self, window):
        two = PDFDocument.from_bytes(make_pdf(2), name="two.pdf")

        with self._interrupt_first_build_step(lambda: window.set_document(two)):
            window.set_document(PDFDocument.from_bytes(make_pdf(6), name="six.pdf"))

        assert window.document is two
        assert window.page_count == 2
        assert sorted(window.page_grid.thumbnails) == [1, 2]
        assert window.file_name_label.text() == "two.pdf"

        window.select_all()
        assert window.selection.sorted_pages == [1, 2]
        summary = window.viewer_toolbar.selection_controls.summary_label.text()
        assert summary == "2 of 2 pages selected"

    def test_closing_document_while_grid_builds(self, window):
        with self._interrupt_first_build_step(window.close_pdf):
            window.set_document(PDFDocument.from_bytes(make_pdf(6), name="six.pdf"))

        assert window.document is None
        assert window.page_count == 0
        assert window.page_grid.thumbnails == {}
        assert window.stack.currentIndex() == UPLOAD_PAGE
        assert window.extract_button.isHidden()

        window.select_all()
        assert window.selection.is_empty()

    def test_extract_with_nothing_selected_is_ignored(self, loaded):
        assert loaded.extract_pages() is False
        assert not loaded.extraction.is_busy()

    def test_zoom_and_columns_follow_view_controller(self, loaded):
        loaded.zoom_in()
        assert loaded.page_grid.zoom == 1.25
        assert loaded.viewer_toolbar.zoom_label.text() == "125%"

        loaded.view_controller.change_columns(-2)
        assert loaded.page_grid.columns == 1
        assert loaded.viewer_toolbar.columns_label.text() == "1col"
        assert not loaded.viewer_toolbar.fewer_columns_button.isEnabled()

    def test_load_pdf_from_disk(self, window, pdf_file):
        assert window.load_pdf(str(pdf_file)) is True
        assert window.page_count == 4

    def test_load_failure_stays_on_upload_screen(self, window, tmp_path):
        broken = tmp_path / "broken.pdf"
        broken.write_bytes(b"garbage, not a pdf")

        with patch.object(main_window_module.QMessageBox, "critical") as critical:
            assert window.load_pdf(str(broken)) is False

        critical.assert_called_once()
        assert window.stack.currentIndex() == UPLOAD_PAGE
        assert window.document is None

    def test_non_pdf_file_is_ignored(self, window, tmp_path):
        text_file = tmp_path / "notes.txt"
        text_file.write_text("hello")

        assert window.input_handler.accept_file(str(text_file)) is False
        assert window.document is None

    def test_extraction_saves_selected_pages(self, loaded, tmp_path):
        target = tmp_path / "out.pdf"
        loaded.toggle_page(5)
        loaded.toggle_page(2)

        with patch.object(
            main_window_module.QFileDialog,
            "getSaveFileName",
            return_value=(str(target), "PDF Files (*.pdf)"),
        ) as dialog:
            assert loaded.extract_pages() is True
            assert loaded.extract_button.text() == "Extracting..."
            assert not loaded.extract_button.isEnabled()
            # A second click while pending does nothing
            assert loaded.extract_pages() is False
            wait_until_idle(loaded.extraction)

        dialog.assert_called_once()
        suggested = dialog.call_args[0][2]
        assert suggested.endswith("extracted_pages_2-5.pdf")
        assert page_widths(target.read_bytes()) == [page_width(2), page_width(5)]
        assert loaded.extract_button.text() == "Extract 2 Pages"

    def test_cancelled_save_writes_nothing(self, loaded, tmp_path):
        loaded.toggle_page(1)

        with patch.object(
            main_window_module.QFileDialog, "getSaveFileName", return_value=("", "")
        ):
            loaded.extract_pages()
            wait_until_idle(loaded.extraction)

        assert list(tmp_path.iterdir()) == []
        assert not loaded.extraction.is_busy()

    def test_extraction_failure_is_reported(self, loaded):
        loaded.toggle_page(1)

        with patch.object(main_window_module.QMessageBox, "warning") as warning, \
                patch("pagepick.core.extraction.page_extractor.fitz.open",
                      side_effect=RuntimeError("bad")):
            loaded.extract_pages()
            wait_until_idle(loaded.extraction)

        warning.assert_called_once()
        assert warning.call_args[0][2] == "Extraction failed"
        assert loaded.extract_button.isEnabled()
