"""
Clickable page thumbnail with selection marking.
"""

from typing import Optional

from PyQt5.QtCore import QRectF, QSize, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QFont, QMouseEvent, QPainter, QPen, QPixmap
from PyQt5.QtWidgets import QLabel, QSizePolicy

from pagepick.styles import ThemeManager

PLACEHOLDER_SIZE = QSize(300, 400)
RING_WIDTH = 3
BADGE_MARGIN = 8


class PageThumbnail(QLabel):
    """
    One page of the grid.

    Clicking emits ``clicked`` with the 1-based page number; the owner
    decides what that means and calls ``set_selected`` back.
    """

    # Signals
    clicked = pyqtSignal(int)  # page number

    def __init__(self, page_number: int, parent=None):
        super().__init__(parent)

        self.page_number = page_number
        self._selected = False
        self._hovered = False

        self.setAlignment(Qt.AlignCenter)
        self.setCursor(Qt.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setToolTip(f"Page {page_number}")
        self.set_page_pixmap(None)

    # ===== State =====

    @property
    def selected(self) -> bool:
        return self._selected

    def set_selected(self, selected: bool):
        if selected != self._selected:
            self._selected = selected
            self.update()

    def set_page_pixmap(self, pixmap: Optional[QPixmap]):
        """Show a rendered page, or a placeholder when rendering failed."""
        if pixmap is None or pixmap.isNull():
            self.clear()
            self.setFixedSize(PLACEHOLDER_SIZE)
        else:
            self.setPixmap(pixmap)
            self.setFixedSize(pixmap.size())

    # ===== Events =====

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.page_number)
            event.accept()
        else:
            super().mousePressEvent(event)

    def enterEvent(self, event):
        self._hovered = True
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event):
        self._hovered = False
        self.update()
        super().leaveEvent(event)

    def paintEvent(self, event):
        colors = ThemeManager.colors()

        if self.pixmap() is None or self.pixmap().isNull():
            painter = QPainter(self)
            painter.fillRect(self.rect(), QColor(colors.bg_placeholder))
            painter.end()
        else:
            super().paintEvent(event)

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        if self._selected:
            self._paint_ring(painter, QColor(colors.accent_primary))
            self._paint_check_badge(painter, QColor(colors.accent_primary))
        elif self._hovered:
            self._paint_ring(painter, QColor(colors.border_dashed))

        self._paint_page_badge(
            painter, QColor(colors.badge_bg), QColor(colors.badge_text)
        )
        painter.end()

    # ===== Painting =====

    def _paint_ring(self, painter: QPainter, color: QColor):
        pen = QPen(color, RING_WIDTH)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        inset = RING_WIDTH / 2
        painter.drawRoundedRect(
            QRectF(self.rect()).adjusted(inset, inset, -inset, -inset), 8, 8
        )

    def _paint_check_badge(self, painter: QPainter, color: QColor):
        size = 24
        badge = QRectF(self.width() - size - BADGE_MARGIN, BADGE_MARGIN, size, size)
        painter.setPen(Qt.NoPen)
        painter.setBrush(color)
        painter.drawEllipse(badge)

        painter.setPen(QPen(Qt.white, 2.5, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        x, y = badge.left(), badge.top()
        painter.drawLine(int(x + 7), int(y + 12), int(x + 11), int(y + 16))
        painter.drawLine(int(x + 11), int(y + 16), int(x + 18), int(y + 8))

    def _paint_page_badge(self, painter: QPainter, bg: QColor, fg: QColor):
        text = f"Page {self.page_number}"
        font = QFont(self.font())
        font.setPointSize(max(7, font.pointSize() - 1))
        painter.setFont(font)

        metrics = painter.fontMetrics()
        width = metrics.horizontalAdvance(text) + 16
        height = metrics.height() + 6
        badge = QRectF(
            self.width() - width - BADGE_MARGIN,
            self.height() - height - BADGE_MARGIN,
            width,
            height,
        )

        painter.setPen(Qt.NoPen)
        painter.setBrush(bg)
        painter.drawRoundedRect(badge, 6, 6)
        painter.setPen(fg)
        painter.drawText(badge, Qt.AlignCenter, text)
