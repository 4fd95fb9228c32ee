"""
Application state management for NBA Players Browser.
Centralizes all UI state into a single AppState class.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pygame

from constants import ALL_PLAYERS, DEFAULT_PAGE_SIZE
from services.players_api.models import Player


@dataclass(frozen=True)
class PlayerEntry:
    """One ranked row of the player list."""

    rank: int
    label: str  # "{rank}. {first_name} {last_name}"
    player: Player


@dataclass(frozen=True)
class ViewState:
    """
    Everything the player screen shows for the loaded page.

    Never mutated: page loads and filter changes build a new instance
    and swap it into AppState in one assignment.
    """

    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 1
    players: Tuple[Player, ...] = ()
    selected_position: str = ALL_PLAYERS
    positions: Tuple[str, ...] = (ALL_PLAYERS,)
    entries: Tuple[PlayerEntry, ...] = ()
    loaded: bool = False

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def labels(self) -> List[str]:
        return [entry.label for entry in self.entries]


@dataclass
class PositionFilterState:
    """State for the position filter modal."""

    show: bool = False
    highlighted: int = 0


@dataclass
class LoadingState:
    """State for the loading indicator."""

    show: bool = False
    message: str = ""


@dataclass
class ErrorModalState:
    """State for the error modal."""

    show: bool = False
    title: str = "Error"
    message: str = ""


@dataclass
class UIRects:
    """Stores rectangles for clickable UI elements."""

    menu_items: List[pygame.Rect] = field(default_factory=list)
    buttons: List[pygame.Rect] = field(default_factory=list)
    filter_button: Optional[pygame.Rect] = None
    modal_items: List[pygame.Rect] = field(default_factory=list)
    modal_ok_button: Optional[pygame.Rect] = None
    close_button: Optional[pygame.Rect] = None
    scroll_offset: int = 0  # Current scroll offset for item index calculation
    modal_scroll_offset: int = 0
    rects: Dict[str, Any] = field(default_factory=dict)


class AppState:
    """
    Centralized application state for NBA Players Browser.

    The loaded page lives in the immutable ``view``; everything else
    here is UI bookkeeping owned by the main thread.
    """

    # Bottom button order
    BUTTONS = ("previous", "next", "exit")

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        # ---- Loaded Page ---- #
        self.view = ViewState(page_size=page_size)
        self.pending_page: Optional[int] = None  # Page of the in-flight load

        # ---- Navigation State ---- #
        self.highlighted: int = 0
        self.focus_area: str = "list"  # "list" or "buttons"
        self.button_index: int = 1  # 0 = Previous, 1 = Next, 2 = Exit

        # ---- Modal States ---- #
        self.position_filter = PositionFilterState()
        self.loading = LoadingState()
        self.error_modal = ErrorModalState()

        # ---- UI Rectangles ---- #
        self.ui_rects = UIRects()

        # ---- Runtime Flags ---- #
        self.running: bool = True

    @property
    def target_page(self) -> int:
        """Page the next Previous/Next step is relative to."""
        if self.pending_page is not None:
            return self.pending_page
        return self.view.current_page

    @property
    def can_go_next(self) -> bool:
        return self.view.loaded and self.target_page < self.view.total_pages

    @property
    def can_go_previous(self) -> bool:
        return self.view.loaded and self.target_page > 1

    def button_enabled(self, action: str) -> bool:
        """Check whether a bottom button is clickable."""
        if action == "next":
            return self.can_go_next
        if action == "previous":
            return self.can_go_previous
        return True

    def reset_navigation(self):
        """Reset list highlight after the list content changed."""
        self.highlighted = 0
        self.ui_rects.scroll_offset = 0
