from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a theme."""
    # Background colors
    bg_app: str
    bg_surface: str
    bg_control: str
    bg_placeholder: str

    # Text colors
    text_primary: str
    text_secondary: str
    text_muted: str

    # Accent colors
    accent_primary: str
    accent_hover: str
    accent_disabled: str

    # Border colors
    border_primary: str
    border_dashed: str

    # Page tile badges
    badge_bg: str
    badge_text: str
