"""
Menu list organism - Scrollable list of menu items.
"""

import pygame
from typing import List, Tuple, Optional, Any, Callable

from ui.theme import Theme, default_theme
from ui.molecules.menu_item import MenuItem


class MenuList:
    """
    Menu list organism.

    Displays a scrollable window onto a list of items, keeping the
    highlighted item in view.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.menu_item = MenuItem(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        items: List[Any],
        highlighted: int,
        item_height: int = 50,
        get_label: Optional[Callable[[Any], str]] = None,
        get_secondary: Optional[Callable[[Any], str]] = None,
        selected: Optional[int] = None,
        item_spacing: int = 0,
        show_highlight: bool = True,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render a menu list.

        Args:
            screen: Surface to render to
            rect: List area rectangle
            items: List of items
            highlighted: Currently highlighted index
            item_height: Height of each item
            get_label: Function to get label from item
            get_secondary: Function to get secondary text
            selected: Index of the active choice, if any
            item_spacing: Gap between items
            show_highlight: Draw the highlight; scrolling follows it either way

        Returns:
            Tuple of (list of visible item rects, scroll offset).
            The rect at position i belongs to items[scroll_offset + i].
        """
        if not items:
            return [], 0

        if get_label is None:
            get_label = str

        total_item_height = item_height + item_spacing
        visible_count = max(1, rect.height // total_item_height)
        scroll_offset = self.calculate_scroll(highlighted, len(items), visible_count)

        item_rects = []
        y = rect.top

        for i in range(scroll_offset, min(scroll_offset + visible_count, len(items))):
            item = items[i]
            item_rect = pygame.Rect(
                rect.left, y, rect.width - self.theme.padding_sm, item_height
            )

            self.menu_item.render(
                screen,
                item_rect,
                get_label(item),
                highlighted=show_highlight and i == highlighted,
                selected=(i == selected),
                secondary_text=get_secondary(item) if get_secondary else None,
            )

            item_rects.append(item_rect)
            y += total_item_height

        self._draw_scroll_indicators(
            screen, rect, scroll_offset, len(items), visible_count
        )

        return item_rects, scroll_offset

    def calculate_scroll(
        self, highlighted: int, total_items: int, visible_count: int
    ) -> int:
        """Calculate scroll offset to keep highlighted item visible."""
        if total_items <= visible_count:
            return 0

        # Rows of context kept above and below the highlight
        context = 2

        min_scroll = max(0, highlighted - visible_count + context + 1)
        max_scroll = total_items - visible_count
        ideal_scroll = max(0, highlighted - context)

        return max(0, min(max(min_scroll, ideal_scroll), max_scroll))

    def _draw_scroll_indicators(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        scroll_offset: int,
        total_items: int,
        visible_count: int,
    ) -> None:
        if total_items <= visible_count:
            return

        scrollbar_height = max(12, rect.height * visible_count // total_items)
        scrollbar_y = rect.top + (rect.height - scrollbar_height) * scroll_offset // (
            total_items - visible_count
        )
        track_rect = pygame.Rect(rect.right - 4, rect.top, 3, rect.height)
        thumb_rect = pygame.Rect(rect.right - 4, scrollbar_y, 3, scrollbar_height)
        pygame.draw.rect(screen, self.theme.surface, track_rect, border_radius=2)
        pygame.draw.rect(screen, self.theme.primary_dark, thumb_rect, border_radius=2)


# Default instance
menu_list = MenuList()
