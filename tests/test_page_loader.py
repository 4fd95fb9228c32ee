"""Tests for the background page loader and its single-slot token."""

import os
import sys
import threading
import time

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.page_loader import PageLoader
from services.players_api import FetchError, PageResult, Player


class FakeClient:
    """Client whose pages finish only when the test releases them."""

    def __init__(self, errors=None):
        self.errors = errors or {}
        self.gates = {}
        self._lock = threading.Lock()

    def gate(self, page):
        with self._lock:
            return self.gates.setdefault(page, threading.Event())

    def release(self, page):
        self.gate(page).set()

    def fetch_page(self, page):
        self.gate(page).wait(timeout=5)
        if page in self.errors:
            raise self.errors[page]
        player = Player(id=page, first_name="Page", last_name=str(page))
        return PageResult(players=(player,), total_pages=10)


def _wait_for_outcome(loader, timeout=5.0):
    deadline = time.time() + timeout
    while time.time() < deadline:
        outcome = loader.update()
        if outcome is not None:
            return outcome
        time.sleep(0.01)
    return None


def _drain(loader, seconds=0.2):
    """Poll for a while, returning every outcome handed back."""
    outcomes = []
    deadline = time.time() + seconds
    while time.time() < deadline:
        outcome = loader.update()
        if outcome is not None:
            outcomes.append(outcome)
        time.sleep(0.01)
    return outcomes


def test_request_returns_increasing_tokens():
    client = FakeClient()
    loader = PageLoader(client)

    first = loader.request(1)
    second = loader.request(2)

    assert second > first
    client.release(1)
    client.release(2)


def test_successful_load():
    client = FakeClient()
    loader = PageLoader(client)
    client.release(3)

    token = loader.request(3)
    outcome = _wait_for_outcome(loader)

    assert outcome is not None
    assert outcome.ok
    assert outcome.token == token
    assert outcome.page == 3
    assert outcome.result.players[0].id == 3


def test_update_without_finished_load_returns_none():
    loader = PageLoader(FakeClient())
    assert loader.update() is None


def test_superseded_result_is_dropped(error_log):
    client = FakeClient()
    loader = PageLoader(client)

    loader.request(2)
    latest = loader.request(3)

    # The older load finishes first and must never be handed back
    client.release(2)
    assert _drain(loader) == []

    client.release(3)
    outcome = _wait_for_outcome(loader)
    assert outcome.token == latest
    assert outcome.page == 3
    assert "Dropped superseded result for page 2" in error_log.read_text()


def test_superseded_result_finishing_last_is_dropped():
    client = FakeClient()
    loader = PageLoader(client)

    loader.request(2)
    loader.request(3)

    client.release(3)
    outcome = _wait_for_outcome(loader)
    assert outcome.page == 3

    client.release(2)
    assert _drain(loader) == []


def test_fetch_error_becomes_error_outcome(error_log):
    client = FakeClient(errors={4: FetchError("500 Server Error", status_code=500)})
    loader = PageLoader(client)
    client.release(4)

    loader.request(4)
    outcome = _wait_for_outcome(loader)

    assert not outcome.ok
    assert outcome.result is None
    assert outcome.error == "500 Server Error"
    assert "Failed to load players page 4" in error_log.read_text()


def test_unexpected_error_still_reports_outcome(error_log):
    client = FakeClient(errors={1: KeyError("boom")})
    loader = PageLoader(client)
    client.release(1)

    loader.request(1)
    outcome = _wait_for_outcome(loader)

    assert not outcome.ok
    assert outcome.error.startswith("KeyError")
    assert "Traceback" in error_log.read_text()
