"""
Modal template - Layout for modal dialogs.
"""

import pygame
from typing import Tuple, Optional, List

from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.atoms.spinner import Spinner
from ui.organisms.modal_frame import ModalFrame
from ui.molecules.action_button import ActionButton


class ModalTemplate:
    """
    Modal template.

    Provides common modal dialog layouts with
    optional action buttons.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.action_button = ActionButton(theme)
        self.text = Text(theme)
        self.spinner = Spinner(theme)

    def render(
        self,
        screen: pygame.Surface,
        width: int,
        height: int,
        title: Optional[str] = None,
        show_close: bool = True,
        buttons: Optional[List[str]] = None,
        title_color=None,
    ) -> Tuple[pygame.Rect, pygame.Rect, Optional[pygame.Rect], List[pygame.Rect]]:
        """
        Render a centered modal dialog.

        Args:
            screen: Surface to render to
            width: Modal width (clamped to the screen)
            height: Content height, button row excluded
            title: Optional title
            show_close: Show close button
            buttons: Optional button labels; the first is drawn focused
            title_color: Title color

        Returns:
            Tuple of (modal_rect, content_rect, close_button_rect, button_rects)
        """
        button_height = self.theme.button_height
        button_area_height = button_height + self.theme.padding_md if buttons else 0

        margin = self.theme.padding_lg
        width = min(width, screen.get_width() - margin * 2)
        total_height = min(height + button_area_height, screen.get_height() - margin * 2)

        modal_rect = pygame.Rect(0, 0, width, total_height)
        modal_rect.center = screen.get_rect().center

        modal_rect, content_rect, close_rect = self.modal_frame.render(
            screen, modal_rect, title, show_close, title_color=title_color
        )

        if buttons:
            content_rect.height -= button_area_height

        button_rects = []
        if buttons:
            button_width = self.theme.button_width
            gap = self.theme.padding_sm
            total_buttons_width = len(buttons) * button_width + (len(buttons) - 1) * gap
            x = modal_rect.centerx - total_buttons_width // 2
            y = modal_rect.bottom - self.theme.padding_md - button_height

            for i, label in enumerate(buttons):
                rect = pygame.Rect(x, y, button_width, button_height)
                self.action_button.render(screen, rect, label, focused=(i == 0))
                button_rects.append(rect)
                x += button_width + gap

        return modal_rect, content_rect, close_rect, button_rects

    def render_message(
        self,
        screen: pygame.Surface,
        title: str,
        message: str,
        button_label: str = "OK",
        title_color=None,
    ) -> Tuple[pygame.Rect, Optional[pygame.Rect], List[pygame.Rect]]:
        """
        Render a simple message modal.

        Returns:
            Tuple of (modal_rect, close_button_rect, button_rects)
        """
        width = 480
        height = 180

        modal_rect, content_rect, close_rect, button_rects = self.render(
            screen,
            width,
            height,
            title,
            show_close=True,
            buttons=[button_label],
            title_color=title_color,
        )

        line_height = self.text.measure("Ag", self.theme.font_size_md)[1] + 4
        self.text.render_multiline(
            screen,
            message,
            content_rect.topleft,
            max_width=content_rect.width,
            color=self.theme.text_primary,
            max_lines=max(1, content_rect.height // line_height),
        )

        return modal_rect, close_rect, button_rects

    def render_loading(self, screen: pygame.Surface, message: str) -> pygame.Rect:
        """
        Render a compact loading panel near the bottom of the screen.

        No backdrop is drawn, the screen behind stays visible and usable.

        Returns:
            Panel rect
        """
        _, text_height = self.text.measure(message, self.theme.font_size_sm)
        spinner_size = 24
        padding = self.theme.padding_sm
        height = max(spinner_size, text_height) + padding * 2
        width = min(320, screen.get_width() - self.theme.padding_lg * 2)

        rect = pygame.Rect(0, 0, width, height)
        rect.centerx = screen.get_width() // 2
        rect.bottom = screen.get_height() - self.theme.padding_lg * 3

        self.modal_frame.render(screen, rect, show_close=False, with_backdrop=False)

        self.spinner.render(
            screen,
            (rect.left + padding + spinner_size // 2, rect.centery),
            size=spinner_size,
        )
        self.text.render(
            screen,
            message,
            (rect.left + padding * 2 + spinner_size, rect.centery),
            color=self.theme.text_primary,
            size=self.theme.font_size_sm,
            max_width=rect.right - padding - (rect.left + padding * 2 + spinner_size),
            valign="middle",
        )
        return rect


# Default instance
modal_template = ModalTemplate()
