"""
Controller for thumbnail zoom and grid layout.
"""
from typing import Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from pagepick.config import (
    DEFAULT_COLUMNS,
    DEFAULT_ZOOM,
    MAX_COLUMNS,
    MIN_COLUMNS,
    ZOOM_LEVELS,
)


class ViewController(QObject):
    """Manages zoom and column state for the thumbnail grid."""

    # Signals
    zoom_changed = pyqtSignal(float)  # Emitted when zoom scale changes
    columns_changed = pyqtSignal(int)  # Emitted when column count changes

    def __init__(self, zoom_levels: Sequence[float] = ZOOM_LEVELS,
                 zoom: float = DEFAULT_ZOOM, columns: int = DEFAULT_COLUMNS):
        super().__init__()

        self.zoom_levels = tuple(zoom_levels)
        if zoom not in self.zoom_levels:
            raise ValueError(f"Zoom {zoom} is not one of {self.zoom_levels}")

        self.zoom: float = zoom
        self.columns: int = self._clamp_columns(columns)

    # ===== Zoom =====

    def _zoom_index(self) -> int:
        return self.zoom_levels.index(self.zoom)

    def can_zoom_in(self) -> bool:
        return self._zoom_index() < len(self.zoom_levels) - 1

    def can_zoom_out(self) -> bool:
        return self._zoom_index() > 0

    def zoom_in(self) -> float:
        """
        Step to the next larger zoom level.

        Returns:
            The zoom scale after the step
        """
        if self.can_zoom_in():
            self._set_zoom(self.zoom_levels[self._zoom_index() + 1])
        return self.zoom

    def zoom_out(self) -> float:
        """
        Step to the next smaller zoom level.

        Returns:
            The zoom scale after the step
        """
        if self.can_zoom_out():
            self._set_zoom(self.zoom_levels[self._zoom_index() - 1])
        return self.zoom

    def zoom_percent(self) -> int:
        return round(self.zoom * 100)

    def _set_zoom(self, zoom: float) -> None:
        if zoom != self.zoom:
            self.zoom = zoom
            self.zoom_changed.emit(zoom)

    # ===== Columns =====

    @staticmethod
    def _clamp_columns(columns: int) -> int:
        return max(MIN_COLUMNS, min(MAX_COLUMNS, columns))

    def can_add_column(self) -> bool:
        return self.columns < MAX_COLUMNS

    def can_remove_column(self) -> bool:
        return self.columns > MIN_COLUMNS

    def change_columns(self, delta: int) -> int:
        """
        Adjust the column count by delta, clamped to the allowed range.

        Args:
            delta: Number of columns to add (negative to remove)

        Returns:
            New column count
        """
        new_columns = self._clamp_columns(self.columns + delta)
        if new_columns != self.columns:
            self.columns = new_columns
            self.columns_changed.emit(new_columns)
        return self.columns
