"""
Header organism - Title bar with page info and filter chip.
"""

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from constants import HEADER_HEIGHT


class Header:
    """
    Header organism.

    Displays the title with an optional subtitle underneath and an
    optional clickable chip on the right side.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        subtitle: Optional[str] = None,
        chip_text: Optional[str] = None,
        chip_active: bool = False,
        height: int = HEADER_HEIGHT,
    ) -> Tuple[pygame.Rect, Optional[pygame.Rect]]:
        """
        Render a header.

        Args:
            screen: Surface to render to
            title: Header title
            subtitle: Optional subtitle
            chip_text: Optional right-aligned chip label
            chip_active: Draw the chip in accent color
            height: Header height

        Returns:
            Tuple of (header_rect, chip_rect or None)
        """
        screen_width = screen.get_width()
        header_rect = pygame.Rect(0, 0, screen_width, height)

        pygame.draw.rect(screen, self.theme.surface, header_rect)
        pygame.draw.line(
            screen,
            self.theme.primary,
            (0, height - 1),
            (screen_width, height - 1),
        )

        padding = self.theme.padding_md
        chip_rect = None
        title_right = screen_width - padding

        if chip_text:
            text_width, text_height = self.text.measure(
                chip_text, size=self.theme.font_size_sm
            )
            chip_width = min(
                text_width + self.theme.padding_md * 2, screen_width // 2
            )
            chip_height = text_height + self.theme.padding_sm * 2
            chip_rect = pygame.Rect(
                screen_width - padding - chip_width,
                (height - chip_height) // 2,
                chip_width,
                chip_height,
            )
            pygame.draw.rect(
                screen,
                self.theme.surface_selected,
                chip_rect,
                border_radius=chip_height // 2,
            )
            pygame.draw.rect(
                screen,
                self.theme.primary if chip_active else self.theme.text_disabled,
                chip_rect,
                width=2,
                border_radius=chip_height // 2,
            )
            self.text.render(
                screen,
                chip_text,
                chip_rect.center,
                color=self.theme.primary if chip_active else self.theme.text_primary,
                size=self.theme.font_size_sm,
                max_width=chip_width - self.theme.padding_sm * 2,
                align="center",
                valign="middle",
            )
            title_right = chip_rect.left - padding

        if subtitle:
            title_y = height // 3
            subtitle_y = height * 2 // 3 + 2
        else:
            title_y = height // 2
            subtitle_y = 0

        self.text.render(
            screen,
            title,
            (padding, title_y),
            color=self.theme.text_primary,
            size=self.theme.font_size_lg,
            max_width=title_right - padding,
            valign="middle",
        )

        if subtitle:
            self.text.render(
                screen,
                subtitle,
                (padding, subtitle_y),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                max_width=title_right - padding,
                valign="middle",
            )

        return header_rect, chip_rect


# Default instance
header = Header()
