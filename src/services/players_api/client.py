"""balldontlie players API client.

One GET per page, no caching and no retries. Responses look like::

    {"data": [{"id": 1, "first_name": "...", "last_name": "...",
               "position": "G", "team": {"full_name": "..."}}, ...],
     "meta": {"total_pages": 76, ...}}
"""

import json
from typing import Optional, Any
from urllib.parse import urlencode

import requests

from constants import API_BASE_URL, DEFAULT_PAGE_SIZE
from services.players_api.models import Player, Team, PageResult


class PlayersApiError(Exception):
    """Base class for failures while loading a page of players."""
    pass


class FetchError(PlayersApiError):
    """Raised on a non-success HTTP status or a transport failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DecodeError(PlayersApiError):
    """Raised when a response body is not a valid players page."""
    pass


def build_players_url(base_url: str, page: int, per_page: int) -> str:
    """Build the paginated players query URL."""
    query = urlencode({"page": page, "per_page": per_page})
    return f"{base_url.rstrip('/')}/players?{query}"


def decode_page(body: str) -> PageResult:
    """
    Parse a players response body.

    Args:
        body: Raw JSON text

    Returns:
        PageResult with the players in API order

    Raises:
        DecodeError: If the body is not JSON or required fields are
            missing or of the wrong type
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON in players response: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("Players response is not a JSON object")

    items = data.get("data")
    if not isinstance(items, list):
        raise DecodeError("Players response has no 'data' list")

    meta = data.get("meta")
    if not isinstance(meta, dict):
        raise DecodeError("Players response has no 'meta' object")

    total_pages = _require(meta, "total_pages", int, "meta")
    players = tuple(_parse_player(item, i) for i, item in enumerate(items))
    return PageResult(players=players, total_pages=total_pages)


def _parse_player(item: Any, index: int) -> Player:
    where = f"data[{index}]"
    if not isinstance(item, dict):
        raise DecodeError(f"{where} is not an object")

    position = item.get("position")
    if position is None:
        position = ""
    elif not isinstance(position, str):
        raise DecodeError(f"{where}.position must be a string")

    return Player(
        id=_require(item, "id", int, where),
        first_name=_require(item, "first_name", str, where),
        last_name=_require(item, "last_name", str, where),
        position=position,
        team=_parse_team(item.get("team"), where),
    )


def _parse_team(team: Any, where: str) -> Team:
    if team is None:
        return Team()
    if not isinstance(team, dict):
        raise DecodeError(f"{where}.team must be an object")
    full_name = team.get("full_name")
    if full_name is None:
        return Team()
    if not isinstance(full_name, str):
        raise DecodeError(f"{where}.team.full_name must be a string")
    return Team(full_name=full_name)


def _require(obj: dict, key: str, kind: type, where: str):
    if key not in obj:
        raise DecodeError(f"{where}.{key} is missing")
    value = obj[key]
    # bool is an int subclass; JSON true/false is never a valid id or count
    if not isinstance(value, kind) or isinstance(value, bool):
        raise DecodeError(f"{where}.{key} must be {kind.__name__}")
    return value


class PlayersApiClient:
    """Client for the balldontlie players endpoint."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self.page_size = page_size
        self.timeout = timeout

    def fetch_page(self, page: int) -> PageResult:
        """Fetch and decode one page of players."""
        return decode_page(self.fetch_page_body(page))

    def fetch_page_body(self, page: int) -> str:
        """
        Fetch the raw body of one page.

        Raises:
            FetchError: On a non-success status or a transport failure
        """
        url = build_players_url(self.base_url, page, self.page_size)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(str(e), status_code=status) from e
        except requests.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        return response.text
