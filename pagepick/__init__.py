"""
PDF Page Extractor: pick pages out of a PDF and save them as a new document.
"""

__version__ = "1.0.0"
