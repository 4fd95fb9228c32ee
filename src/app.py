"""
NBA Players Browser Application - Main orchestrator.

This module provides the main application class that coordinates
all components: state, settings, services, input, and UI.
"""

import traceback

import pygame

from constants import APP_NAME, APP_VERSION, FPS, DATA_DIR
from state import AppState
from config.settings import Settings, load_settings
from services.players_api import PlayersApiClient
from services.page_loader import PageLoader
from services.player_browser import PlayerBrowser
from input.navigation import NavigationHandler
from input.touch import TouchHandler
from ui.theme import Theme
from ui.screens.screen_manager import ScreenManager
from utils.logging import log_error, init_log_file

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
FILTER_KEYS = (pygame.K_f, pygame.K_TAB)


class PlayerBrowserApp:
    """
    Main application class for NBA Players Browser.

    Orchestrates all components and runs the main loop.
    """

    def __init__(self):
        """Initialize the application."""
        init_log_file()

        self.settings = self._load_settings()

        pygame.init()
        pygame.display.set_caption(APP_NAME)

        if self.settings.fullscreen:
            display_info = pygame.display.Info()
            self.screen = pygame.display.set_mode(
                (display_info.current_w, display_info.current_h),
                pygame.FULLSCREEN,
            )
        else:
            self.screen = pygame.display.set_mode(
                (self.settings.window_width, self.settings.window_height)
            )
        self.clock = pygame.time.Clock()

        self.theme = Theme()
        self.state = AppState(page_size=self.settings.page_size)

        # Initialize services
        self.client = PlayersApiClient(
            base_url=self.settings.api_base_url,
            page_size=self.settings.page_size,
            timeout=self.settings.request_timeout,
        )
        self.loader = PageLoader(self.client)
        self.browser = PlayerBrowser(self.settings, self.state, self.loader)

        # Initialize handlers
        self.navigation = NavigationHandler()
        self.touch = TouchHandler()

        self.screen_manager = ScreenManager(self.theme)

        print(f"{APP_NAME} {APP_VERSION}, data directory: {DATA_DIR}")
        print(f"Players API: {self.settings.api_base_url}")

    def _load_settings(self) -> Settings:
        """Load settings, falling back to defaults on invalid values."""
        try:
            return Settings.from_dict(load_settings())
        except (TypeError, ValueError) as e:
            log_error(
                "Invalid settings, using defaults",
                type(e).__name__,
                traceback.format_exc(),
            )
            return Settings()

    def run(self):
        """Run the main application loop."""
        self.browser.start()

        while self.state.running:
            self.clock.tick(FPS)

            self.navigation.update()
            self.navigation.handle_continuous(self._move_highlight)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.state.running = False

                elif event.type == pygame.KEYDOWN:
                    self._handle_key_event(event)

                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        self.touch.handle_mouse_down(event)

                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        self.touch.handle_mouse_up(event, on_click=self._handle_click)

                elif event.type == pygame.MOUSEWHEEL:
                    self.touch.handle_mouse_wheel(event, on_scroll=self._handle_scroll)

                elif event.type == pygame.MOUSEMOTION:
                    self.touch.handle_mouse_motion(event, on_scroll=self._handle_scroll)

            # Apply finished page loads from the background thread
            self.browser.update()

            self._render_frame()

        pygame.quit()

    def _render_frame(self):
        """Render a single frame and remember the clickable rects."""
        rects = self.screen_manager.render(self.screen, self.state)

        self.state.ui_rects.menu_items = rects.get("item_rects", [])
        self.state.ui_rects.scroll_offset = rects.get("scroll_offset", 0)
        self.state.ui_rects.buttons = rects.get("buttons", [])
        self.state.ui_rects.filter_button = rects.get("filter_button")
        self.state.ui_rects.modal_items = rects.get("modal_items", [])
        self.state.ui_rects.modal_scroll_offset = rects.get("modal_scroll_offset", 0)
        self.state.ui_rects.modal_ok_button = rects.get("ok_button")
        self.state.ui_rects.close_button = rects.get("close")
        self.state.ui_rects.rects = rects

        pygame.display.flip()

    # ---- Keyboard ---- #

    def _handle_key_event(self, event: pygame.event.Event):
        """Handle keyboard events."""
        key = event.key

        if self.state.error_modal.show:
            if key in CONFIRM_KEYS or key == pygame.K_ESCAPE:
                self._close_error()
            return

        if self.state.position_filter.show:
            if key == pygame.K_UP:
                self._move_highlight("up")
            elif key == pygame.K_DOWN:
                self._move_highlight("down")
            elif key in CONFIRM_KEYS:
                self._apply_position(self.state.position_filter.highlighted)
            elif key == pygame.K_ESCAPE or key in FILTER_KEYS:
                self.state.position_filter.show = False
            return

        if key == pygame.K_ESCAPE:
            self.state.running = False
        elif key in FILTER_KEYS:
            self._open_position_filter()
        elif key == pygame.K_UP:
            self._move_highlight("up")
        elif key == pygame.K_DOWN:
            self._move_highlight("down")
        elif key == pygame.K_LEFT:
            if self.state.focus_area == "buttons":
                self._move_button_focus(-1)
            else:
                self.browser.previous_page()
        elif key == pygame.K_RIGHT:
            if self.state.focus_area == "buttons":
                self._move_button_focus(1)
            else:
                self.browser.next_page()
        elif key == pygame.K_PAGEUP:
            self._move_list_highlight(-self._page_step())
        elif key == pygame.K_PAGEDOWN:
            self._move_list_highlight(self._page_step())
        elif key == pygame.K_HOME:
            self._move_list_highlight(-len(self.state.view.entries))
        elif key == pygame.K_END:
            self._move_list_highlight(len(self.state.view.entries))
        elif key in CONFIRM_KEYS:
            if self.state.focus_area == "buttons":
                self._activate_button(AppState.BUTTONS[self.state.button_index])

    def _move_highlight(self, direction: str):
        """Move highlight in the given direction."""
        if self.state.error_modal.show:
            return

        if self.state.position_filter.show:
            count = len(self.state.view.positions)
            if count == 0:
                return
            step = -1 if direction == "up" else 1
            self.state.position_filter.highlighted = (
                self.state.position_filter.highlighted + step
            ) % count
            return

        if self.state.focus_area == "buttons":
            if direction == "up" and self.state.view.entries:
                self.state.focus_area = "list"
                self.state.highlighted = len(self.state.view.entries) - 1
            return

        count = len(self.state.view.entries)
        if direction == "up":
            self.state.highlighted = max(0, self.state.highlighted - 1)
        elif direction == "down":
            if count == 0 or self.state.highlighted >= count - 1:
                # Past the last row focus drops to the buttons
                self.state.focus_area = "buttons"
                if not self.state.button_enabled(
                    AppState.BUTTONS[self.state.button_index]
                ):
                    self._move_button_focus(1)
            else:
                self.state.highlighted += 1

    def _move_list_highlight(self, delta: int):
        count = len(self.state.view.entries)
        if count == 0:
            return
        self.state.focus_area = "list"
        self.state.highlighted = max(0, min(count - 1, self.state.highlighted + delta))

    def _page_step(self) -> int:
        return max(1, len(self.state.ui_rects.menu_items) - 1)

    def _move_button_focus(self, step: int):
        """Move focus to the next enabled bottom button."""
        count = len(AppState.BUTTONS)
        index = self.state.button_index
        for _ in range(count):
            index = (index + step) % count
            if self.state.button_enabled(AppState.BUTTONS[index]):
                self.state.button_index = index
                return

    # ---- Mouse ---- #

    def _handle_click(self, pos: tuple):
        """Handle click events."""
        x, y = pos
        rects = self.state.ui_rects

        if self.state.error_modal.show:
            for rect in (rects.modal_ok_button, rects.close_button):
                if rect and rect.collidepoint(x, y):
                    self._close_error()
                    return
            return

        if self.state.position_filter.show:
            if rects.close_button and rects.close_button.collidepoint(x, y):
                self.state.position_filter.show = False
                return
            for i, rect in enumerate(rects.modal_items):
                if rect.collidepoint(x, y):
                    self._apply_position(i + rects.modal_scroll_offset)
                    return
            modal_rect = rects.rects.get("modal")
            if modal_rect and not modal_rect.collidepoint(x, y):
                self.state.position_filter.show = False
            return

        if rects.filter_button and rects.filter_button.collidepoint(x, y):
            self._open_position_filter()
            return

        for i, rect in enumerate(rects.buttons):
            if rect.collidepoint(x, y):
                action = AppState.BUTTONS[i]
                if self.state.button_enabled(action):
                    self.state.button_index = i
                    self._activate_button(action)
                return

        # List rows only take the highlight, they have no action
        for i, rect in enumerate(rects.menu_items):
            if rect.collidepoint(x, y):
                self.state.focus_area = "list"
                self.state.highlighted = i + rects.scroll_offset
                return

    def _handle_scroll(self, amount: float):
        """Handle scroll events. Amount is in rows, positive scrolls up."""
        steps = int(abs(amount))
        if steps == 0:
            steps = 1 if amount != 0 else 0

        if self.state.position_filter.show:
            direction = "up" if amount > 0 else "down"
            for _ in range(steps):
                self._move_highlight(direction)
            return

        if self.state.error_modal.show:
            return

        self._move_list_highlight(-steps if amount > 0 else steps)

    # ---- Actions ---- #

    def _activate_button(self, action: str):
        if action == "previous":
            self.browser.previous_page()
        elif action == "next":
            self.browser.next_page()
        elif action == "exit":
            self.state.running = False

    def _open_position_filter(self):
        positions = self.state.view.positions
        selected = self.state.view.selected_position
        self.state.position_filter.highlighted = (
            positions.index(selected) if selected in positions else 0
        )
        self.state.position_filter.show = True

    def _apply_position(self, index: int):
        positions = self.state.view.positions
        if 0 <= index < len(positions):
            self.browser.select_position(positions[index])
            self.state.focus_area = "list"
        self.state.position_filter.show = False

    def _close_error(self):
        self.state.error_modal.show = False
        self.state.error_modal.message = ""


def main():
    """Entry point for the application."""
    try:
        app = PlayerBrowserApp()
        app.run()
    except Exception as e:
        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
