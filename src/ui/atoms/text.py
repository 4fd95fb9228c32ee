"""
Text atom - Basic text rendering component.
"""

import pygame
from typing import List, Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Text:
    """
    Basic text rendering atom.

    Renders single lines with alignment and ellipsis truncation.
    Fonts are created lazily per size.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._font_cache: dict = {}

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the given size."""
        if size not in self._font_cache:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_cache[size] = pygame.font.Font(self.theme.font_path, size)
        return self._font_cache[size]

    def render(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        align: str = "left",  # "left", "center", "right"
        valign: str = "top",  # "top", "middle"
    ) -> pygame.Rect:
        """
        Render text to the screen.

        Args:
            screen: Surface to render to
            text: Text to render
            position: Anchor point; meaning depends on align/valign
            color: Text color (default: text_primary)
            size: Font size (default: font_size_md)
            max_width: Truncate with ellipsis beyond this width
            align: Horizontal alignment
            valign: Vertical alignment

        Returns:
            Rect of rendered text
        """
        if color is None:
            color = self.theme.text_primary
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)
        if max_width:
            text = self.truncate(text, font, max_width)

        surface = font.render(text, True, color)
        rect = surface.get_rect()

        x, y = position
        if align == "center":
            rect.centerx = x
        elif align == "right":
            rect.right = x
        else:
            rect.left = x

        if valign == "middle":
            rect.centery = y
        else:
            rect.top = y

        screen.blit(surface, rect)
        return rect

    def render_multiline(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        max_width: int,
        color: Optional[Color] = None,
        size: Optional[int] = None,
        line_spacing: int = 4,
        max_lines: Optional[int] = None,
    ) -> pygame.Rect:
        """
        Render word-wrapped text.

        Returns:
            Bounding rect of all rendered lines
        """
        if size is None:
            size = self.theme.font_size_md

        lines = self.wrap(text, max_width, size)
        if max_lines is not None and len(lines) > max_lines:
            lines = lines[:max_lines]
            lines[-1] = self.truncate(lines[-1] + "...", self.get_font(size), max_width)

        x, y = position
        bounds = pygame.Rect(x, y, 0, 0)
        for line in lines:
            rect = self.render(screen, line, (x, y), color=color, size=size)
            bounds.union_ip(rect)
            y += rect.height + line_spacing
        return bounds

    def wrap(self, text: str, max_width: int, size: Optional[int] = None) -> List[str]:
        """Split text into lines no wider than max_width."""
        if size is None:
            size = self.theme.font_size_md
        font = self.get_font(size)

        lines: List[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if font.size(candidate)[0] <= max_width:
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                # A single word wider than the line is cut
                current = self.truncate(word, font, max_width)
            lines.append(current)
        return lines

    def measure(self, text: str, size: Optional[int] = None) -> Tuple[int, int]:
        """Measure text dimensions without rendering."""
        if size is None:
            size = self.theme.font_size_md
        return self.get_font(size).size(text)

    def truncate(
        self, text: str, font: pygame.font.Font, max_width: int, suffix: str = "..."
    ) -> str:
        """
        Truncate text to fit within max_width.

        Args:
            text: Text to truncate
            font: Font to use for measurement
            max_width: Maximum width in pixels
            suffix: Appended when text was cut

        Returns:
            Text that fits, with suffix if shortened
        """
        if font.size(text)[0] <= max_width:
            return text

        available_width = max_width - font.size(suffix)[0]

        # Binary search for the longest prefix that fits
        low, high = 0, len(text)
        while low < high:
            mid = (low + high + 1) // 2
            if font.size(text[:mid])[0] <= available_width:
                low = mid
            else:
                high = mid - 1

        return text[:low] + suffix
