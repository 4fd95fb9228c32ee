"""
Page loader service for NBA Players Browser.
Fetches pages in background threads and hands results back to the main thread.
"""

import threading
import traceback
from dataclasses import dataclass
from queue import Queue, Empty
from typing import Optional

from services.players_api import PlayersApiClient, PlayersApiError, PageResult
from utils.logging import log_error


@dataclass(frozen=True)
class LoadOutcome:
    """Result of one page request, success or failure."""

    token: int
    page: int
    result: Optional[PageResult] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.result is not None


class PageLoader:
    """
    Loads one page at a time without blocking the UI.

    Every request takes a new token; only the outcome of the latest
    token is handed back by update(). Superseded threads are left to
    finish and their outcomes are dropped.
    """

    def __init__(self, client: PlayersApiClient):
        self.client = client
        self._results: Queue = Queue()
        self._lock = threading.Lock()
        self._token = 0

    def request(self, page: int) -> int:
        """
        Start loading a page, superseding any load in flight.

        Args:
            page: 1-based page number

        Returns:
            Token of the new request
        """
        with self._lock:
            self._token += 1
            token = self._token

        thread = threading.Thread(target=self._load, args=(token, page), daemon=True)
        thread.start()
        return token

    def update(self) -> Optional[LoadOutcome]:
        """
        Collect finished loads.
        Should be called from main thread each frame.

        Returns:
            Outcome of the latest request once it finished, else None
        """
        latest = None
        while True:
            try:
                outcome = self._results.get_nowait()
            except Empty:
                break

            with self._lock:
                current = self._token
            if outcome.token != current:
                log_error(
                    f"Dropped superseded result for page {outcome.page}",
                    "StaleResult",
                )
                continue
            latest = outcome

        return latest

    def _load(self, token: int, page: int):
        """Fetch a page in a background thread."""
        try:
            result = self.client.fetch_page(page)
            self._results.put(LoadOutcome(token=token, page=page, result=result))
        except PlayersApiError as e:
            log_error(
                f"Failed to load players page {page}: {e}",
                type(e).__name__,
                traceback.format_exc(),
            )
            self._results.put(LoadOutcome(token=token, page=page, error=str(e)))
        except Exception as e:
            log_error(
                f"Unexpected error loading players page {page}",
                type(e).__name__,
                traceback.format_exc(),
            )
            self._results.put(
                LoadOutcome(token=token, page=page, error=f"{type(e).__name__}: {e}")
            )
