"""
Upload area shown while no document is loaded.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout


class UploadArea(QFrame):
    """Dashed drop target; clicking it asks the window to open a file dialog."""

    # Signals
    browse_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("UploadArea")
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(480, 240)
        self.setMaximumWidth(672)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignCenter)

        icon = QLabel("⇧", self)
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet("font-size: 40px; color: #9ca3af;")
        layout.addWidget(icon)

        title = QLabel("Drop your PDF here", self)
        title.setObjectName("UploadTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        hint = QLabel("or click to browse", self)
        hint.setObjectName("UploadHint")
        hint.setAlignment(Qt.AlignCenter)
        layout.addWidget(hint)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.browse_requested.emit()
            event.accept()
        else:
            super().mousePressEvent(event)
