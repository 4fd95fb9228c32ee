"""Tests for paging and filtering applied to AppState."""

import os
import sys
from unittest.mock import MagicMock

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from config.settings import Settings
from constants import ALL_PLAYERS
from services.page_loader import LoadOutcome
from services.player_browser import PlayerBrowser
from services.players_api import PageResult, Player, Team
from state import AppState


class FakeLoader:
    """Synchronous stand-in for PageLoader; the test decides each outcome."""

    def __init__(self):
        self.requests = []
        self.outcome = None
        self._token = 0

    def request(self, page):
        self._token += 1
        self.requests.append(page)
        return self._token

    def finish(self, result=None, error=""):
        self.outcome = LoadOutcome(
            token=self._token, page=self.requests[-1], result=result, error=error
        )

    def update(self):
        outcome, self.outcome = self.outcome, None
        return outcome


def _page(total_pages=5, positions=("G", "F", "C")):
    players = tuple(
        Player(i + 1, f"First{i + 1}", f"Last{i + 1}", pos, Team("Team"))
        for i, pos in enumerate(positions)
    )
    return PageResult(players=players, total_pages=total_pages)


def _make_browser(**settings):
    state = AppState(page_size=3)
    loader = FakeLoader()
    browser = PlayerBrowser(Settings(page_size=3, **settings), state, loader)
    return browser, state, loader


def _load(browser, loader, result=None, error=""):
    loader.finish(result=result, error=error)
    assert browser.update()


def test_start_requests_first_page():
    browser, state, loader = _make_browser()
    browser.start()

    assert loader.requests == [1]
    assert state.pending_page == 1
    assert state.loading.show
    # Nothing loaded yet, so paging is off
    assert not state.can_go_next
    assert not state.can_go_previous


def test_first_page_applied():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())

    assert state.view.current_page == 1
    assert state.view.labels == ["1. First1 Last1", "2. First2 Last2", "3. First3 Last3"]
    assert state.pending_page is None
    assert not state.loading.show
    assert state.can_go_next
    assert not state.can_go_previous


def test_update_without_outcome():
    browser, _, _ = _make_browser()
    assert browser.update() is False


def test_next_four_times_reaches_last_page():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page(total_pages=5))

    for _ in range(4):
        assert browser.next_page()
        _load(browser, loader, _page(total_pages=5))

    assert state.view.current_page == 5
    assert loader.requests == [1, 2, 3, 4, 5]
    assert not state.can_go_next
    assert state.can_go_previous
    assert browser.next_page() is False


def test_previous_disabled_on_first_page():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())

    assert browser.previous_page() is False
    assert loader.requests == [1]


def test_ranks_continue_on_later_pages():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())
    browser.next_page()
    _load(browser, loader, _page())

    assert [e.rank for e in state.view.entries] == [4, 5, 6]


def test_failed_next_keeps_page_and_list():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())
    view_before = state.view

    browser.next_page()
    _load(browser, loader, error="500 Server Error: INTERNAL SERVER ERROR")

    assert state.view is view_before
    assert state.view.current_page == 1
    assert state.pending_page is None
    assert not state.loading.show
    assert state.error_modal.show
    assert state.error_modal.title == "Error"
    assert state.error_modal.message == (
        "Error loading players: 500 Server Error: INTERNAL SERVER ERROR"
    )


def test_failed_initial_load_shows_error():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, error="Request failed")

    assert state.error_modal.show
    assert not state.view.loaded
    assert state.view.entries == ()
    assert not state.can_go_next


def test_error_closes_position_filter():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())
    state.position_filter.show = True

    browser.next_page()
    _load(browser, loader, error="timeout")

    assert not state.position_filter.show
    assert state.error_modal.show


def test_repeated_next_moves_from_target_page():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page(total_pages=5))

    browser.next_page()
    browser.next_page()
    browser.next_page()

    assert loader.requests == [1, 2, 3, 4]
    assert state.target_page == 4
    # Only the last request finishes; it lands on page 4
    _load(browser, loader, _page(total_pages=5))
    assert state.view.current_page == 4


def test_repeated_next_stops_at_last_page():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page(total_pages=2))

    assert browser.next_page()
    assert browser.next_page() is False
    assert loader.requests == [1, 2]


def test_filter_resets_on_page_load_by_default():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())

    browser.select_position("F")
    assert state.view.selected_position == "F"
    assert state.view.labels == ["1. First2 Last2"]

    browser.next_page()
    _load(browser, loader, _page())

    assert state.view.selected_position == ALL_PLAYERS
    assert len(state.view.entries) == 3


def test_filter_kept_when_enabled_and_present():
    browser, state, loader = _make_browser(keep_position_filter=True)
    browser.start()
    _load(browser, loader, _page())
    browser.select_position("F")

    browser.next_page()
    _load(browser, loader, _page(positions=("F", "F", "G")))

    assert state.view.selected_position == "F"
    assert [e.rank for e in state.view.entries] == [4, 5]


def test_filter_reset_when_enabled_but_absent():
    browser, state, loader = _make_browser(keep_position_filter=True)
    browser.start()
    _load(browser, loader, _page())
    browser.select_position("C")

    browser.next_page()
    _load(browser, loader, _page(positions=("G", "F")))

    assert state.view.selected_position == ALL_PLAYERS


def test_open_filter_highlight_follows_rebuilt_positions():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())
    state.position_filter.show = True
    state.position_filter.highlighted = 3

    browser.next_page()
    _load(browser, loader, _page(positions=("F",)))

    assert state.view.positions == (ALL_PLAYERS, "F")
    assert state.position_filter.highlighted == 0


def test_select_position_resets_highlight():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page())
    state.highlighted = 2

    browser.select_position("G")

    assert state.highlighted == 0


def test_button_focus_leaves_disabled_button_on_last_page():
    browser, state, loader = _make_browser()
    browser.start()
    _load(browser, loader, _page(total_pages=2))
    state.button_index = AppState.BUTTONS.index("next")

    browser.next_page()
    _load(browser, loader, _page(total_pages=2))

    assert state.button_enabled(AppState.BUTTONS[state.button_index])
    assert AppState.BUTTONS[state.button_index] == "previous"


def test_load_page_uses_loader():
    state = AppState()
    loader = MagicMock()
    browser = PlayerBrowser(Settings(), state, loader)

    browser.load_page(7)

    loader.request.assert_called_once_with(7)
    assert state.loading.message == "Loading page 7..."
