"""
Spinner atom - Animated loading spinner.
"""

import math
import time

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Spinner:
    """
    Rotating arc drawn over a faded ring.
    The angle comes from wall-clock time, so no per-frame state is kept.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        center: Tuple[int, int],
        size: int = 40,
        color: Optional[Color] = None,
        speed: float = 1.0,
    ) -> None:
        if color is None:
            color = self.theme.primary

        radius = size // 2
        cx, cy = center
        rotation = (time.time() * speed * 2 * math.pi) % (2 * math.pi)

        pygame.draw.circle(screen, self.theme.surface_hover, center, radius, 3)

        arc_length = math.pi * 0.75
        steps = 20
        points = []
        for i in range(steps + 1):
            angle = rotation + arc_length * i / steps
            points.append(
                (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
            )
        pygame.draw.lines(screen, color, False, points, 3)
