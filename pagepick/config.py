"""Application-wide configuration constants."""
import logging

# Application
APP_NAME = "PagePick"
WINDOW_TITLE = "PDF Page Extractor"
MIN_WINDOW_SIZE = (800, 600)

# Thumbnail zoom: fixed discrete scale factors
ZOOM_LEVELS = (0.5, 0.75, 1.0, 1.25, 1.5, 1.75, 2.0)
DEFAULT_ZOOM = 1.0

# Thumbnail grid layout
MIN_COLUMNS = 1
MAX_COLUMNS = 4
DEFAULT_COLUMNS = 3
GRID_SPACING = 24

# Rendering
PIXMAP_CACHE_SIZE = 3  # zoom levels kept per page

# Extraction output
PDF_MIME_TYPE = "application/pdf"
OUTPUT_NAME_PREFIX = "extracted_pages_"
OUTPUT_PAGE_SEPARATOR = "-"

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
