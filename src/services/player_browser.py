"""
Player browser service for NBA Players Browser.
Applies paging and filter commands to the application state.
"""

from constants import ALL_PLAYERS
from config.settings import Settings
from services.page_loader import PageLoader, LoadOutcome
from services.player_view import build_view_state, select_position
from state import AppState


class PlayerBrowser:
    """
    Drives page loads and the position filter.

    The page number only changes once its load succeeded; a failed
    load keeps the previous page on screen and raises the error modal.
    """

    def __init__(self, settings: Settings, state: AppState, loader: PageLoader):
        """
        Initialize the player browser.

        Args:
            settings: Application settings
            state: Reference to the AppState
            loader: Background page loader
        """
        self.settings = settings
        self.state = state
        self.loader = loader

    def start(self):
        """Request the first page."""
        self.load_page(1)

    def load_page(self, page: int):
        """
        Request a page, superseding any load in flight.

        Args:
            page: 1-based page number
        """
        self.state.pending_page = page
        self.state.loading.show = True
        self.state.loading.message = f"Loading page {page}..."
        self.loader.request(page)

    def next_page(self) -> bool:
        """Go forward one page. Returns False when already on the last page."""
        if not self.state.can_go_next:
            return False
        self.load_page(self.state.target_page + 1)
        return True

    def previous_page(self) -> bool:
        """Go back one page. Returns False when already on the first page."""
        if not self.state.can_go_previous:
            return False
        self.load_page(self.state.target_page - 1)
        return True

    def select_position(self, position: str):
        """Filter the loaded page by position."""
        self.state.view = select_position(self.state.view, position)
        self.state.reset_navigation()

    def update(self) -> bool:
        """
        Apply a finished load, if any.
        Should be called from main thread each frame.

        Returns:
            True if a load finished this frame
        """
        outcome = self.loader.update()
        if outcome is None:
            return False

        self.state.pending_page = None
        self.state.loading.show = False
        self.state.loading.message = ""

        if outcome.ok:
            self._apply(outcome)
        else:
            self._show_error(outcome.error)
        return True

    def _apply(self, outcome: LoadOutcome):
        selected = ALL_PLAYERS
        if self.settings.keep_position_filter:
            selected = self.state.view.selected_position

        self.state.view = build_view_state(
            outcome.result,
            current_page=outcome.page,
            page_size=self.settings.page_size,
            selected_position=selected,
        )
        self.state.reset_navigation()
        if self.state.position_filter.show:
            # Positions list was rebuilt; point back at the active choice
            self.state.position_filter.highlighted = self.state.view.positions.index(
                self.state.view.selected_position
            )

        # Keep keyboard focus on a usable button at either end of the range
        if not self.state.button_enabled(AppState.BUTTONS[self.state.button_index]):
            for index, action in enumerate(AppState.BUTTONS):
                if self.state.button_enabled(action):
                    self.state.button_index = index
                    break

    def _show_error(self, message: str):
        self.state.position_filter.show = False
        self.state.error_modal.show = True
        self.state.error_modal.title = "Error"
        self.state.error_modal.message = f"Error loading players: {message}"
