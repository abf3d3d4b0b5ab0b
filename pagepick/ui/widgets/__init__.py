"""
Custom widgets for page picking.
"""

from .page_grid import PageGrid
from .page_thumbnail import PageThumbnail
from .selection_controls import SelectionControls
from .upload_area import UploadArea
from .viewer_toolbar import ViewerToolbar

__all__ = [
    "PageGrid",
    "PageThumbnail",
    "SelectionControls",
    "UploadArea",
    "ViewerToolbar",
]
