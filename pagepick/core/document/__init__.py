"""
PDF document handling.
"""
from .pdf_document import PDFDocument, is_pdf_file

__all__ = ['PDFDocument', 'is_pdf_file']
