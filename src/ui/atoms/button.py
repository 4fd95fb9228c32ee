"""
Button atom - Button shape rendering.
"""

import pygame
from typing import Optional

from ui.theme import Theme, Color, default_theme


class Button:
    """
    Button shape atom.

    Draws the filled body of a button with an optional drop shadow
    and outline. Labels are drawn by the ActionButton molecule.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        shadow: bool = True,
        border_color: Optional[Color] = None,
        border_width: int = 0,
    ) -> pygame.Rect:
        """
        Render a button shape.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            color: Fill color (default: surface_hover)
            shadow: Draw shadow below the button
            border_color: Outline color
            border_width: Outline width, 0 for none

        Returns:
            Button rect
        """
        if color is None:
            color = self.theme.surface_hover
        radius = self.theme.radius_md

        if shadow:
            shadow_surface = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(
                shadow_surface,
                self.theme.shadow,
                shadow_surface.get_rect(),
                border_radius=radius,
            )
            screen.blit(shadow_surface, (rect.x, rect.y + 2))

        pygame.draw.rect(screen, color, rect, border_radius=radius)

        if border_color and border_width > 0:
            pygame.draw.rect(
                screen, border_color, rect, width=border_width, border_radius=radius
            )

        return rect
