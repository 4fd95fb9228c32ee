"""
Error modal - Error message display.
"""

import pygame
from typing import List, Tuple, Optional

from ui.theme import Theme, default_theme
from ui.templates.modal_template import ModalTemplate


class ErrorModal:
    """
    Error modal.

    Displays an error message with an OK button.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_template = ModalTemplate(theme)

    def render(
        self, screen: pygame.Surface, title: str, message: str
    ) -> Tuple[pygame.Rect, Optional[pygame.Rect], List[pygame.Rect]]:
        """
        Render an error modal.

        Args:
            screen: Surface to render to
            title: Error title
            message: Error message, wrapped to the modal width

        Returns:
            Tuple of (modal_rect, close_button_rect, button_rects)
        """
        return self.modal_template.render_message(
            screen, title, message, button_label="OK", title_color=self.theme.error
        )


# Default instance
error_modal = ErrorModal()
