"""
Toolbar above the thumbnail grid: zoom, columns and selection controls.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton, QWidget

from pagepick.controllers import ViewController
from pagepick.ui.widgets.selection_controls import SelectionControls


class ViewerToolbar(QFrame):
    """Binds zoom and column buttons to a ViewController."""

    def __init__(self, view_controller: ViewController, parent=None):
        super().__init__(parent)
        self.setObjectName("ViewerToolbar")
        self.view_controller = view_controller

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(16)

        # Zoom controls
        zoom_group, zoom_layout = self._create_group()
        self.zoom_out_button = self._create_tool_button("−", "Zoom Out", zoom_group)
        self.zoom_out_button.clicked.connect(lambda: view_controller.zoom_out())
        zoom_layout.addWidget(self.zoom_out_button)

        self.zoom_label = QLabel(zoom_group)
        self.zoom_label.setAlignment(Qt.AlignCenter)
        self.zoom_label.setMinimumWidth(60)
        zoom_layout.addWidget(self.zoom_label)

        self.zoom_in_button = self._create_tool_button("+", "Zoom In", zoom_group)
        self.zoom_in_button.clicked.connect(lambda: view_controller.zoom_in())
        zoom_layout.addWidget(self.zoom_in_button)
        layout.addWidget(zoom_group)

        # Column controls
        column_group, column_layout = self._create_group()
        self.fewer_columns_button = self._create_tool_button(
            "−", "Decrease Columns", column_group
        )
        self.fewer_columns_button.clicked.connect(
            lambda: view_controller.change_columns(-1)
        )
        column_layout.addWidget(self.fewer_columns_button)

        self.columns_label = QLabel(column_group)
        self.columns_label.setAlignment(Qt.AlignCenter)
        self.columns_label.setMinimumWidth(40)
        column_layout.addWidget(self.columns_label)

        self.more_columns_button = self._create_tool_button(
            "+", "Increase Columns", column_group
        )
        self.more_columns_button.clicked.connect(
            lambda: view_controller.change_columns(1)
        )
        column_layout.addWidget(self.more_columns_button)
        layout.addWidget(column_group)

        layout.addStretch(1)

        self.selection_controls = SelectionControls(self)
        layout.addWidget(self.selection_controls)

        view_controller.zoom_changed.connect(self.refresh)
        view_controller.columns_changed.connect(self.refresh)
        self.refresh()

    def _create_group(self):
        group = QFrame(self)
        group.setObjectName("ControlGroup")
        group_layout = QHBoxLayout(group)
        group_layout.setContentsMargins(4, 4, 4, 4)
        group_layout.setSpacing(4)
        return group, group_layout

    def _create_tool_button(self, text: str, tooltip: str, parent: QWidget) -> QToolButton:
        btn = QToolButton(parent)
        btn.setText(text)
        btn.setToolTip(tooltip)
        btn.setFixedSize(32, 32)
        return btn

    def refresh(self, *_):
        """Sync labels and button enablement with the view state."""
        vc = self.view_controller
        self.zoom_label.setText(f"{vc.zoom_percent()}%")
        self.zoom_out_button.setEnabled(vc.can_zoom_out())
        self.zoom_in_button.setEnabled(vc.can_zoom_in())

        self.columns_label.setText(f"{vc.columns}col")
        self.fewer_columns_button.setEnabled(vc.can_remove_column())
        self.more_columns_button.setEnabled(vc.can_add_column())
