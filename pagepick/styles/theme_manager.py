"""
Theme management and styling for the application.
"""
from PyQt5.QtWidgets import QWidget

from .models import ThemeColors


class ThemeManager:
    """Manages application styling."""

    LIGHT_THEME = ThemeColors(
        # Backgrounds
        bg_app="#f9fafb",
        bg_surface="#ffffff",
        bg_control="#f3f4f6",
        bg_placeholder="#e5e7eb",

        # Text
        text_primary="#111827",
        text_secondary="#374151",
        text_muted="#6b7280",

        # Accent
        accent_primary="#2563eb",
        accent_hover="#1d4ed8",
        accent_disabled="#93b4f5",

        # Borders
        border_primary="#e5e7eb",
        border_dashed="#d1d5db",

        # Badges
        badge_bg="#bf1f2937",
        badge_text="#ffffff",
    )

    @classmethod
    def colors(cls) -> ThemeColors:
        return cls.LIGHT_THEME

    @classmethod
    def apply_theme(cls, widget: QWidget) -> None:
        """
        Apply the theme to a widget and its children.

        Args:
            widget: Widget to style
        """
        widget.setStyleSheet(cls._generate_stylesheet(cls.LIGHT_THEME))

    @classmethod
    def _generate_stylesheet(cls, theme: ThemeColors) -> str:
        """
        Generate a complete stylesheet from theme colors.

        Args:
            theme: Theme colors to use

        Returns:
            Complete CSS stylesheet string
        """
        return f"""
            /* --- GENERAL STYLES --- */
            QMainWindow, QScrollArea, QScrollArea > QWidget > QWidget {{
                background-color: {theme.bg_app};
                color: {theme.text_primary};
            }}

            /* --- HEADER --- */
            #HeaderFrame {{
                background-color: {theme.bg_surface};
                border-bottom: 1px solid {theme.border_primary};
            }}
            #HeaderTitle {{
                font-size: 18px;
                font-weight: 600;
                color: {theme.text_primary};
            }}

            /* --- TOOLBAR --- */
            #ViewerToolbar {{
                background-color: {theme.bg_surface};
                border-bottom: 1px solid {theme.border_primary};
            }}
            #ControlGroup {{
                background-color: {theme.bg_control};
                border-radius: 8px;
            }}
            QLabel {{
                background-color: transparent;
                color: {theme.text_secondary};
            }}
            QLabel[objectName="statusLabel"] {{
                color: {theme.text_muted};
            }}

            /* --- BUTTONS --- */
            QPushButton {{
                background-color: {theme.bg_control};
                color: {theme.text_secondary};
                border: none;
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: 500;
            }}
            QPushButton:hover {{
                background-color: {theme.bg_placeholder};
            }}
            QPushButton:disabled {{
                color: {theme.text_muted};
            }}

            QToolButton {{
                background-color: transparent;
                color: {theme.text_secondary};
                border: none;
                border-radius: 6px;
                padding: 4px;
                min-width: 28px;
                min-height: 28px;
                font-weight: bold;
            }}
            QToolButton:hover {{
                background-color: {theme.bg_surface};
            }}
            QToolButton:disabled {{
                color: {theme.text_muted};
            }}

            #ExtractButton {{
                background-color: {theme.accent_primary};
                color: white;
                padding: 12px 24px;
                border-radius: 8px;
                font-weight: 600;
            }}
            #ExtractButton:hover {{
                background-color: {theme.accent_hover};
            }}
            #ExtractButton:disabled {{
                background-color: {theme.accent_disabled};
                color: white;
            }}

            /* --- UPLOAD AREA --- */
            #UploadArea {{
                background-color: {theme.bg_app};
                border: 2px dashed {theme.border_dashed};
                border-radius: 8px;
            }}
            #UploadArea:hover {{
                background-color: {theme.bg_control};
            }}
            #UploadTitle {{
                font-size: 16px;
                font-weight: 500;
                color: {theme.text_secondary};
            }}
            #UploadHint {{
                color: {theme.text_muted};
            }}

            /* --- SCROLL BAR --- */
            QScrollBar:vertical {{
                background-color: {theme.bg_app};
                width: 12px;
                border: none;
            }}
            QScrollBar::handle:vertical {{
                background-color: {theme.border_dashed};
                border-radius: 6px;
                min-height: 20px;
            }}
            QScrollBar::add-line:vertical,
            QScrollBar::sub-line:vertical {{
                background: none;
                height: 0px;
            }}
        """
