"""Shared fixtures: an offscreen Qt application and in-memory PDFs."""
import os
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import fitz  # PyMuPDF
import pytest
from PyQt5.QtWidgets import QApplication

BASE_WIDTH = 200
PAGE_HEIGHT = 300


def page_width(page_number: int) -> int:
    """Test pages are told apart by width: page N is BASE_WIDTH + N wide."""
    return BASE_WIDTH + page_number


def make_pdf(page_count: int) -> bytes:
    """Build a PDF whose page N is labelled and sized after N."""
    doc = fitz.open()
    for page_number in range(1, page_count + 1):
        page = doc.new_page(width=page_width(page_number), height=PAGE_HEIGHT)
        page.insert_text((20, 40), f"Source page {page_number}")
    data = doc.tobytes()
    doc.close()
    return data


def page_widths(data: bytes):
    """Widths of every page of a serialized PDF, in page order."""
    with fitz.open(stream=data, filetype="pdf") as doc:
        return [round(page.rect.width) for page in doc]


def wait_until_idle(coordinator, timeout: float = 10.0):
    """Let the worker finish and deliver its queued signals."""
    app = QApplication.instance()
    coordinator.wait(int(timeout * 1000))
    deadline = time.monotonic() + timeout
    while coordinator.is_busy() and time.monotonic() < deadline:
        app.processEvents()
    app.processEvents()


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def ten_page_pdf():
    return make_pdf(10)


@pytest.fixture
def pdf_file(tmp_path):
    """A 4-page PDF on disk."""
    path = tmp_path / "sample.pdf"
    path.write_bytes(make_pdf(4))
    return path
