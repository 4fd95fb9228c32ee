"""
Theme and design tokens for NBA Players Browser.
Centralizes all visual constants for consistent styling.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]
ColorAlpha = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the application UI.

    Hardwood floor browns with a ball-orange accent.
    Immutable so screens can share one instance.
    """

    # ---- Base Colors ---- #
    background: Color = (24, 18, 14)
    surface: Color = (40, 30, 22)
    surface_hover: Color = (58, 43, 30)
    surface_selected: Color = (74, 52, 34)

    # ---- Primary Accent (Ball Orange) ---- #
    primary: Color = (238, 110, 36)
    primary_dark: Color = (176, 78, 22)

    # ---- Text Colors ---- #
    text_primary: Color = (245, 236, 224)
    text_secondary: Color = (196, 176, 152)
    text_disabled: Color = (104, 88, 72)

    # ---- Status Colors ---- #
    error: Color = (220, 60, 50)

    # ---- Effects ---- #
    shadow: ColorAlpha = (0, 0, 0, 90)
    backdrop_alpha: int = 170

    # ---- Spacing ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 16
    padding_lg: int = 24

    # ---- Typography ---- #
    font_size_sm: int = 20
    font_size_md: int = 26
    font_size_lg: int = 34
    font_path: Optional[str] = None  # None = pygame default font

    # ---- Shapes ---- #
    radius_sm: int = 4
    radius_md: int = 6

    # ---- Component Sizes ---- #
    button_width: int = 140
    button_height: int = 40

    # ---- Menu ---- #
    menu_cursor: str = "> "


# Default theme instance
default_theme = Theme()
