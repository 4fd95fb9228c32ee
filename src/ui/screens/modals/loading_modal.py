"""
Loading modal - Spinner shown while a page loads.
"""

import pygame

from ui.theme import Theme, default_theme
from ui.templates.modal_template import ModalTemplate


class LoadingModal:
    """
    Loading modal.

    Drawn without a backdrop so the list and buttons behind it stay
    usable while the request is in flight.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_template = ModalTemplate(theme)

    def render(self, screen: pygame.Surface, message: str) -> pygame.Rect:
        return self.modal_template.render_loading(screen, message)


# Default instance
loading_modal = LoadingModal()
