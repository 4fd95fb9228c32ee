"""
Screen manager - Coordinates screen rendering based on app state.
"""

import pygame
from typing import Dict, Any

from ui.theme import Theme, default_theme
from state import AppState
from .players_screen import PlayersScreen
from .modals.position_filter_modal import PositionFilterModal
from .modals.loading_modal import LoadingModal
from .modals.error_modal import ErrorModal


class ScreenManager:
    """
    Screen manager.

    Draws the players screen and layers the open modals on top of it.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

        self.players_screen = PlayersScreen(theme)

        self.position_filter_modal = PositionFilterModal(theme)
        self.loading_modal = LoadingModal(theme)
        self.error_modal = ErrorModal(theme)

    def render(self, screen: pygame.Surface, state: AppState) -> Dict[str, Any]:
        """
        Render the current frame.

        Args:
            screen: Surface to render to
            state: Application state object

        Returns:
            Dictionary of interactive element rects. Keys of the screen
            behind an open modal are left out so clicks cannot reach it.
        """
        rects: Dict[str, Any] = {}
        screen.fill(self.theme.background)

        filter_rect, item_rects, scroll_offset, button_rects = (
            self.players_screen.render(screen, state)
        )

        if state.loading.show:
            self.loading_modal.render(screen, state.loading.message)

        # Error takes precedence over the filter modal
        if state.error_modal.show:
            modal_rect, close_rect, ok_rects = self.error_modal.render(
                screen, state.error_modal.title, state.error_modal.message
            )
            rects["modal"] = modal_rect
            rects["close"] = close_rect
            rects["ok_button"] = ok_rects[0] if ok_rects else None
            return rects

        if state.position_filter.show:
            modal_rect, modal_items, modal_scroll, close_rect = (
                self.position_filter_modal.render(
                    screen,
                    state.view.positions,
                    state.position_filter.highlighted,
                    state.view.selected_position,
                )
            )
            rects["modal"] = modal_rect
            rects["close"] = close_rect
            rects["modal_items"] = modal_items
            rects["modal_scroll_offset"] = modal_scroll
            return rects

        rects["filter_button"] = filter_rect
        rects["item_rects"] = item_rects
        rects["scroll_offset"] = scroll_offset
        rects["buttons"] = button_rects
        return rects
