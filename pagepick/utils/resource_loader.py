"""
Platform directory helpers.
"""
import os
from pathlib import Path


def get_downloads_dir() -> Path:
    """
    Get the directory the save dialog should open in.

    Falls back to the home directory when no downloads folder exists.

    Returns:
        Path to the downloads directory
    """
    if os.name == 'nt':  # Windows
        base_dir = Path(os.environ.get('USERPROFILE', os.path.expanduser('~')))
    else:  # macOS, Linux and others
        base_dir = Path.home()

    downloads = base_dir / "Downloads"
    if downloads.is_dir():
        return downloads
    return base_dir


def suggested_save_path(file_name: str) -> str:
    """Full default path offered by the save dialog for a file name."""
    return str(get_downloads_dir() / file_name)
