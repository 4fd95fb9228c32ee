"""Tests for the balldontlie players client: URL building, fetching, decoding."""

import json
import os
import sys
from unittest.mock import MagicMock

import pytest
import requests

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.players_api import (
    DecodeError,
    FetchError,
    PlayersApiClient,
    PlayersApiError,
    Team,
    build_players_url,
    decode_page,
)


def _player(pid=1, first="A", last="B", position="G", team="X"):
    item = {"id": pid, "first_name": first, "last_name": last, "position": position}
    if team is not None:
        item["team"] = {"full_name": team}
    return item


def _body(players, total_pages=3, **extra_meta):
    meta = {"total_pages": total_pages, "current_page": 1}
    meta.update(extra_meta)
    return json.dumps({"data": players, "meta": meta})


def _response(status=200, text=""):
    response = MagicMock()
    response.status_code = status
    response.text = text
    if status >= 400:
        error = requests.HTTPError(f"{status} Server Error: boom", response=response)
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


# ---- Request builder ---- #


def test_build_players_url():
    url = build_players_url("https://www.balldontlie.io/api/v1", 3, 50)
    assert url == "https://www.balldontlie.io/api/v1/players?page=3&per_page=50"


def test_build_players_url_trailing_slash():
    url = build_players_url("http://localhost:8000/api/", 1, 25)
    assert url == "http://localhost:8000/api/players?page=1&per_page=25"


# ---- Decoder ---- #


def test_decode_single_player_page():
    result = decode_page(_body([_player()], total_pages=3))

    assert result.total_pages == 3
    assert len(result.players) == 1
    player = result.players[0]
    assert player.id == 1
    assert player.first_name == "A"
    assert player.last_name == "B"
    assert player.position == "G"
    assert player.team == Team(full_name="X")


def test_decode_keeps_api_order():
    players = [_player(pid=i, first=f"P{i}") for i in (5, 2, 9)]
    result = decode_page(_body(players))
    assert [p.id for p in result.players] == [5, 2, 9]


def test_decode_null_position_becomes_empty():
    result = decode_page(_body([_player(position=None)]))
    assert result.players[0].position == ""


def test_decode_missing_team_becomes_empty():
    result = decode_page(_body([_player(team=None)]))
    assert result.players[0].team.full_name == ""


def test_decode_ignores_unknown_fields():
    item = _player()
    item["height_feet"] = 6
    item["team"]["city"] = "Somewhere"
    result = decode_page(_body([item], total_pages=1, next_page=2))
    assert result.players[0].team.full_name == "X"


def test_decode_empty_page():
    result = decode_page(_body([], total_pages=1))
    assert result.players == ()
    assert result.total_pages == 1


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "[1, 2, 3]",
        json.dumps({"meta": {"total_pages": 1}}),
        json.dumps({"data": [], "meta": {}}),
        json.dumps({"data": [], "meta": {"total_pages": "3"}}),
        json.dumps({"data": [], "meta": {"total_pages": True}}),
        json.dumps({"data": {}, "meta": {"total_pages": 1}}),
    ],
)
def test_decode_rejects_malformed_envelope(body):
    with pytest.raises(DecodeError):
        decode_page(body)


@pytest.mark.parametrize(
    "field,value",
    [
        ("id", "1"),
        ("id", None),
        ("first_name", 7),
        ("last_name", None),
        ("position", 3),
    ],
)
def test_decode_rejects_mistyped_player_fields(field, value):
    item = _player()
    item[field] = value
    with pytest.raises(DecodeError):
        decode_page(_body([item]))


def test_decode_rejects_missing_required_player_field():
    item = _player()
    del item["last_name"]
    with pytest.raises(DecodeError) as exc_info:
        decode_page(_body([item]))
    assert "last_name" in str(exc_info.value)


def test_decode_error_is_players_api_error():
    with pytest.raises(PlayersApiError):
        decode_page("{")


# ---- Fetcher ---- #


def test_fetch_page_requests_built_url(monkeypatch):
    get = MagicMock(return_value=_response(text=_body([_player()])))
    monkeypatch.setattr(requests, "get", get)

    client = PlayersApiClient(base_url="http://api.test/v1", page_size=25, timeout=5.0)
    result = client.fetch_page(2)

    get.assert_called_once_with(
        "http://api.test/v1/players?page=2&per_page=25", timeout=5.0
    )
    assert result.players[0].first_name == "A"


def test_fetch_page_default_timeout_is_none(monkeypatch):
    get = MagicMock(return_value=_response(text=_body([])))
    monkeypatch.setattr(requests, "get", get)

    PlayersApiClient(base_url="http://api.test").fetch_page_body(1)

    assert get.call_args.kwargs["timeout"] is None


def test_fetch_http_error_raises_fetch_error(monkeypatch):
    monkeypatch.setattr(requests, "get", MagicMock(return_value=_response(status=500)))

    client = PlayersApiClient(base_url="http://api.test")
    with pytest.raises(FetchError) as exc_info:
        client.fetch_page(1)

    assert exc_info.value.status_code == 500
    assert "500" in str(exc_info.value)


def test_fetch_transport_error_raises_fetch_error(monkeypatch):
    monkeypatch.setattr(
        requests,
        "get",
        MagicMock(side_effect=requests.ConnectionError("connection refused")),
    )

    client = PlayersApiClient(base_url="http://api.test")
    with pytest.raises(FetchError) as exc_info:
        client.fetch_page_body(1)

    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)


def test_fetch_bad_body_raises_decode_error(monkeypatch):
    monkeypatch.setattr(
        requests, "get", MagicMock(return_value=_response(text="<html>oops</html>"))
    )

    with pytest.raises(DecodeError):
        PlayersApiClient(base_url="http://api.test").fetch_page(1)
