"""
Position filter modal - Pick the position shown in the player list.
"""

import pygame
from typing import List, Sequence, Tuple, Optional

from ui.theme import Theme, default_theme
from ui.organisms.modal_frame import ModalFrame
from ui.organisms.menu_list import MenuList


class PositionFilterModal:
    """
    Position filter modal.

    Lists "All players" followed by every position found on the
    loaded page; the active one is drawn in accent color.
    """

    ITEM_HEIGHT = 36
    MAX_VISIBLE = 8

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.menu_list = MenuList(theme)

    def render(
        self,
        screen: pygame.Surface,
        positions: Sequence[str],
        highlighted: int,
        selected_position: str,
    ) -> Tuple[pygame.Rect, List[pygame.Rect], int, Optional[pygame.Rect]]:
        """
        Render the position filter modal.

        Args:
            screen: Surface to render to
            positions: Selectable positions, "All players" first
            highlighted: Highlighted index
            selected_position: Currently applied position

        Returns:
            Tuple of (modal_rect, item_rects, scroll_offset, close_button_rect)
        """
        padding = self.theme.padding_md
        visible = max(1, min(len(positions), self.MAX_VISIBLE))
        width = min(360, screen.get_width() - self.theme.padding_lg * 2)
        height = ModalFrame.TITLE_HEIGHT + padding * 2 + visible * self.ITEM_HEIGHT
        height = min(height, screen.get_height() - self.theme.padding_lg * 2)

        rect = pygame.Rect(0, 0, width, height)
        rect.center = screen.get_rect().center

        modal_rect, content_rect, close_rect = self.modal_frame.render(
            screen, rect, title="Position"
        )

        selected = (
            positions.index(selected_position)
            if selected_position in positions
            else None
        )
        item_rects, scroll_offset = self.menu_list.render(
            screen,
            content_rect,
            list(positions),
            highlighted,
            item_height=self.ITEM_HEIGHT,
            selected=selected,
        )

        return modal_rect, item_rects, scroll_offset, close_rect


# Default instance
position_filter_modal = PositionFilterModal()
