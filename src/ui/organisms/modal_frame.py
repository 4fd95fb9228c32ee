"""
Modal frame organism - Modal dialog container.
"""

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class ModalFrame:
    """
    Modal frame organism.

    Dims the screen behind the dialog, then draws the dialog body,
    an optional title bar and an optional close button.
    """

    TITLE_HEIGHT = 48
    CLOSE_SIZE = 28

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        title: Optional[str] = None,
        show_close: bool = True,
        title_color=None,
        with_backdrop: bool = True,
    ) -> Tuple[pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Render a modal frame.

        Args:
            screen: Surface to render to
            rect: Modal rectangle
            title: Optional title
            show_close: Show close button in the title bar
            title_color: Title color (default: text_primary)
            with_backdrop: Dim the screen behind the dialog

        Returns:
            Tuple of (modal_rect, content_rect, close_button_rect or None)
        """
        if with_backdrop:
            self._render_backdrop(screen)

        radius = self.theme.radius_md
        pygame.draw.rect(screen, self.theme.surface, rect, border_radius=radius)
        pygame.draw.rect(
            screen, self.theme.primary_dark, rect, width=2, border_radius=radius
        )

        header_height = self.TITLE_HEIGHT if title else 0
        padding = self.theme.padding_md

        content_rect = pygame.Rect(
            rect.left + padding,
            rect.top + header_height + padding,
            rect.width - padding * 2,
            rect.height - header_height - padding * 2,
        )

        close_button_rect = None

        if title:
            self.text.render(
                screen,
                title,
                (rect.left + padding, rect.top + header_height // 2),
                color=title_color or self.theme.text_primary,
                size=self.theme.font_size_lg,
                max_width=rect.width - padding * 3 - self.CLOSE_SIZE,
                valign="middle",
            )
            pygame.draw.line(
                screen,
                self.theme.surface_selected,
                (rect.left + padding, rect.top + header_height),
                (rect.right - padding, rect.top + header_height),
            )

            if show_close:
                close_button_rect = pygame.Rect(
                    rect.right - padding - self.CLOSE_SIZE,
                    rect.top + (header_height - self.CLOSE_SIZE) // 2,
                    self.CLOSE_SIZE,
                    self.CLOSE_SIZE,
                )
                self._render_close(screen, close_button_rect)

        return rect, content_rect, close_button_rect

    def _render_backdrop(self, screen: pygame.Surface) -> None:
        backdrop = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        backdrop.fill((0, 0, 0, self.theme.backdrop_alpha))
        screen.blit(backdrop, (0, 0))

    def _render_close(self, screen: pygame.Surface, rect: pygame.Rect) -> None:
        inset = rect.width // 4
        color = self.theme.text_secondary
        pygame.draw.line(
            screen,
            color,
            (rect.left + inset, rect.top + inset),
            (rect.right - inset, rect.bottom - inset),
            2,
        )
        pygame.draw.line(
            screen,
            color,
            (rect.right - inset, rect.top + inset),
            (rect.left + inset, rect.bottom - inset),
            2,
        )


# Default instance
modal_frame = ModalFrame()
