"""
Builds a new PDF from selected pages of a source PDF.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import fitz  # PyMuPDF

from pagepick.config import OUTPUT_NAME_PREFIX, OUTPUT_PAGE_SEPARATOR
from pagepick.core.errors import ExtractionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Serialized output document and the page numbers it was built from."""

    data: bytes
    pages: Tuple[int, ...]
    file_name: str

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def save(self, file_path: str) -> None:
        """Write the document to disk. Raises OSError on failure."""
        with open(file_path, "wb") as f:
            f.write(self.data)


def output_file_name(pages: Iterable[int]) -> str:
    """
    Suggested file name for an extraction.

    Pages 2 and 5 give ``extracted_pages_2-5.pdf`` whatever order they
    are passed in.
    """
    joined = OUTPUT_PAGE_SEPARATOR.join(str(p) for p in sorted(set(pages)))
    return f"{OUTPUT_NAME_PREFIX}{joined}.pdf"


def extract_pages(source: bytes, pages: Iterable[int]) -> ExtractionResult:
    """
    Copy the given pages of a PDF into a new document.

    Pages are appended in ascending order, one at a time, into an initially
    empty target which is then serialized.

    Args:
        source: Raw bytes of the source PDF
        pages: 1-based page numbers to keep

    Returns:
        ExtractionResult holding the new document's bytes

    Raises:
        ExtractionError: if loading, copying or saving fails
    """
    sorted_pages: List[int] = sorted(set(pages))
    if not sorted_pages:
        raise ExtractionError(f"{ExtractionError.MESSAGE}: no pages selected")

    src = None
    target = None
    try:
        src = fitz.open(stream=source, filetype="pdf")

        out_of_range = [p for p in sorted_pages if not 1 <= p <= src.page_count]
        if out_of_range:
            raise ExtractionError(
                f"{ExtractionError.MESSAGE}: pages {out_of_range} outside 1-{src.page_count}"
            )

        target = fitz.open()
        for page_number in sorted_pages:
            index = page_number - 1
            target.insert_pdf(src, from_page=index, to_page=index)

        data = target.tobytes(garbage=4, deflate=True)

    except ExtractionError:
        raise
    except Exception as e:
        raise ExtractionError(f"{ExtractionError.MESSAGE}: {e}") from e
    finally:
        if target is not None:
            target.close()
        if src is not None:
            src.close()

    logger.debug("Extracted %d page(s): %s", len(sorted_pages), sorted_pages)
    return ExtractionResult(
        data=data,
        pages=tuple(sorted_pages),
        file_name=output_file_name(sorted_pages),
    )
