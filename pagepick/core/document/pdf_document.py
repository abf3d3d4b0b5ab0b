"""
PDF document loading and thumbnail rendering.
"""

import logging
import mimetypes
import os
from collections import OrderedDict
from typing import Dict, Optional

import fitz  # PyMuPDF
from PyQt5.QtGui import QImage, QPixmap

from pagepick.config import PDF_MIME_TYPE, PIXMAP_CACHE_SIZE
from pagepick.core.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def is_pdf_file(file_path: str) -> bool:
    """
    Check whether a file reports the PDF content type.

    Args:
        file_path: Path of the candidate file

    Returns:
        True if the file is a PDF by content type
    """
    if not file_path:
        return False
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type == PDF_MIME_TYPE


class PDFDocument:
    """
    A loaded source PDF: its raw bytes, page count and a rendering handle.

    The raw bytes are what extraction works from; the open fitz document is
    only used on the GUI thread to draw thumbnails.
    """

    def __init__(self, data: bytes, name: str = "document.pdf",
                 file_path: Optional[str] = None):
        self.data = bytes(data)
        self.name = name
        self.file_path = file_path

        try:
            self._doc: Optional[fitz.Document] = fitz.open(
                stream=self.data, filetype="pdf"
            )
        except Exception as e:
            raise DocumentLoadError(f"Could not open {name}: {e}") from e

        self.page_count: int = self._doc.page_count
        if self.page_count == 0:
            self._doc.close()
            self._doc = None
            raise DocumentLoadError(f"{name} has no pages")

        # page number -> (zoom -> pixmap), oldest zoom first
        self._pixmap_cache: Dict[int, "OrderedDict[float, QPixmap]"] = {}

    @classmethod
    def from_path(cls, file_path: str) -> "PDFDocument":
        """
        Read a PDF from disk.

        Raises:
            DocumentLoadError: if the file cannot be read or parsed
        """
        try:
            with open(file_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise DocumentLoadError(f"Could not read {file_path}: {e}") from e

        return cls(data, name=os.path.basename(file_path), file_path=file_path)

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "document.pdf") -> "PDFDocument":
        """Open a PDF held in memory."""
        return cls(data, name=name)

    def close(self) -> None:
        """Release the rendering handle and drop cached thumbnails."""
        self._pixmap_cache.clear()
        if self._doc is not None:
            self._doc.close()
            self._doc = None

    def render_page(self, page_number: int, zoom: float) -> Optional[QPixmap]:
        """
        Render one page to a pixmap at the given scale.

        Args:
            page_number: 1-based page number
            zoom: Scale factor (1.0 = 72 dpi)

        Returns:
            QPixmap of the page, or None if rendering failed
        """
        if self._doc is None or not (1 <= page_number <= self.page_count):
            return None

        page_cache = self._pixmap_cache.setdefault(page_number, OrderedDict())
        if zoom in page_cache:
            page_cache.move_to_end(zoom)
            return page_cache[zoom]

        try:
            page = self._doc.load_page(page_number - 1)
            pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
            img = QImage(
                pix.samples, pix.width, pix.height, pix.stride, QImage.Format_RGB888
            )
            # QImage does not own pix.samples
            pixmap = QPixmap.fromImage(img.copy())
        except Exception:
            logger.exception("Error rendering page %d of %s", page_number, self.name)
            return None

        page_cache[zoom] = pixmap
        while len(page_cache) > PIXMAP_CACHE_SIZE:
            page_cache.popitem(last=False)

        return pixmap

    def __repr__(self):
        return f"PDFDocument(name={self.name!r}, page_count={self.page_count})"
