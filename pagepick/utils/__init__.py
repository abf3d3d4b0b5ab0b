"""
Utility functions and helpers.
"""
from .logger import setup_logging
from .resource_loader import (
    get_downloads_dir,
    suggested_save_path,
)

__all__ = [
    'setup_logging',
    'get_downloads_dir',
    'suggested_save_path',
]
