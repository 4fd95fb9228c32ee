"""
Menu item molecule - Text-based menu items.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class MenuItem:
    """
    Menu item molecule.

    Renders one list row with a cursor prefix when highlighted and
    optional secondary text on the right.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        highlighted: bool = False,
        selected: bool = False,
        secondary_text: Optional[str] = None,
    ) -> pygame.Rect:
        """
        Render a menu item.

        Args:
            screen: Surface to render to
            rect: Item rectangle
            label: Primary text
            highlighted: Item is under the cursor
            selected: Item is the active choice (drawn in accent color)
            secondary_text: Optional secondary text (right side)

        Returns:
            Item rect
        """
        padding = self.theme.padding_sm
        content_left = rect.left + padding
        content_right = rect.right - padding

        if highlighted:
            pygame.draw.rect(
                screen,
                self.theme.surface_selected,
                rect,
                border_radius=self.theme.radius_sm,
            )

        if secondary_text:
            secondary_width, _ = self.text.measure(
                secondary_text, size=self.theme.font_size_sm
            )
            # Secondary text may take at most 40% of the row
            secondary_width = min(secondary_width, int(rect.width * 0.4))
            self.text.render(
                screen,
                secondary_text,
                (content_right, rect.centery),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                max_width=secondary_width,
                align="right",
                valign="middle",
            )
            content_right -= secondary_width + padding

        if highlighted or selected:
            text_color = self.theme.primary
        else:
            text_color = self.theme.text_primary

        # Retro terminal style cursor
        cursor = self.theme.menu_cursor
        display_label = cursor + label if highlighted else " " * len(cursor) + label

        self.text.render(
            screen,
            display_label,
            (content_left, rect.centery),
            color=text_color,
            size=self.theme.font_size_md,
            max_width=content_right - content_left,
            valign="middle",
        )

        return rect


# Default instance
menu_item = MenuItem()
