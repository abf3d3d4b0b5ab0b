from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget


def selection_summary(selected_count: int, total_pages: int) -> str:
    return f"{selected_count} of {total_pages} pages selected"


class SelectionControls(QWidget):
    """Selected-page counter with Select All / Deselect All buttons."""

    # Signals
    select_all_requested = pyqtSignal()
    deselect_all_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.summary_label = QLabel(selection_summary(0, 0), self)
        self.summary_label.setObjectName("statusLabel")
        layout.addWidget(self.summary_label)
        layout.addSpacing(8)

        self.select_all_button = QPushButton("Select All", self)
        self.select_all_button.clicked.connect(self.select_all_requested)
        layout.addWidget(self.select_all_button)

        self.deselect_all_button = QPushButton("Deselect All", self)
        self.deselect_all_button.clicked.connect(self.deselect_all_requested)
        layout.addWidget(self.deselect_all_button)

        self.update_counts(0, 0)

    def update_counts(self, selected_count: int, total_pages: int):
        self.summary_label.setText(selection_summary(selected_count, total_pages))
        self.deselect_all_button.setEnabled(selected_count > 0)
