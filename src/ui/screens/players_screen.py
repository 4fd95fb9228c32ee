"""
Players screen - Ranked player list for the loaded page.
"""

import pygame
from typing import List, Tuple, Optional

from ui.theme import Theme, default_theme
from ui.templates.list_screen import ListScreenTemplate
from constants import APP_NAME, ALL_PLAYERS, LIST_ITEM_HEIGHT, LIST_ITEM_SPACING
from state import AppState, PlayerEntry

BUTTON_LABELS = {
    "previous": "Previous",
    "next": "Next",
    "exit": "Exit",
}


def page_subtitle(current_page: int, total_pages: int) -> str:
    return f"Page {current_page} of {total_pages}"


class PlayersScreen:
    """
    Players screen.

    Shows the ranked entries of the current view with the page counter,
    the position filter chip and the Previous/Next/Exit buttons.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.template = ListScreenTemplate(theme)

    def render(
        self, screen: pygame.Surface, state: AppState
    ) -> Tuple[Optional[pygame.Rect], List[pygame.Rect], int, List[pygame.Rect]]:
        """
        Render the players screen.

        Args:
            screen: Surface to render to
            state: Application state

        Returns:
            Tuple of (filter_chip_rect, item_rects, scroll_offset, button_rects)
        """
        view = state.view

        if view.loaded:
            subtitle = page_subtitle(view.current_page, view.total_pages)
            empty_message = "No players on this page"
        else:
            subtitle = None
            empty_message = "" if state.loading.show else "No players loaded"

        buttons = [
            (BUTTON_LABELS[action], state.button_enabled(action))
            for action in AppState.BUTTONS
        ]
        focused_button = state.button_index if state.focus_area == "buttons" else None

        return self.template.render(
            screen,
            title=APP_NAME,
            items=list(view.entries),
            highlighted=state.highlighted,
            buttons=buttons,
            focused_button=focused_button,
            subtitle=subtitle,
            chip_text=f"Position: {view.selected_position}",
            chip_active=view.selected_position != ALL_PLAYERS,
            empty_message=empty_message,
            item_height=LIST_ITEM_HEIGHT,
            item_spacing=LIST_ITEM_SPACING,
            get_label=self._get_label,
            get_secondary=self._get_secondary,
            show_highlight=state.focus_area == "list",
        )

    def _get_label(self, entry: PlayerEntry) -> str:
        return entry.label

    def _get_secondary(self, entry: PlayerEntry) -> str:
        player = entry.player
        if player.position:
            return f"{player.position}  {player.team.full_name}".strip()
        return player.team.full_name


# Default instance
players_screen = PlayersScreen()
