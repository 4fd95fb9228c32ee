"""
Player view derivation for NBA Players Browser.

Turns a loaded PageResult into the ViewState the player screen renders:
the position filter entries, the ranked display list and the pagination
bounds. All functions are pure; nothing is cached between loads.
"""

from dataclasses import replace
from typing import List, Sequence, Tuple

from constants import ALL_PLAYERS
from services.players_api.models import Player, PageResult
from state import PlayerEntry, ViewState


def global_rank(current_page: int, page_size: int, local_index: int) -> int:
    """
    Display rank of a row.

    Args:
        current_page: 1-based page number
        page_size: Players requested per page
        local_index: 0-based index within the filtered list

    Returns:
        1-based rank continuing across pages
    """
    return (current_page - 1) * page_size + local_index + 1


def derive_positions(players: Sequence[Player]) -> Tuple[str, ...]:
    """
    Distinct non-empty positions in first-seen order, after the
    "All players" entry.
    """
    positions: List[str] = [ALL_PLAYERS]
    seen = set()
    for player in players:
        position = player.position
        if not position or position in seen:
            continue
        seen.add(position)
        positions.append(position)
    return tuple(positions)


def filter_players(players: Sequence[Player], position: str) -> List[Player]:
    """Keep players whose position equals the filter exactly."""
    if position == ALL_PLAYERS:
        return list(players)
    return [p for p in players if p.position == position]


def derive_entries(
    players: Sequence[Player],
    position: str,
    current_page: int,
    page_size: int,
) -> Tuple[PlayerEntry, ...]:
    """Build the ranked display rows for the selected position."""
    entries = []
    for index, player in enumerate(filter_players(players, position)):
        rank = global_rank(current_page, page_size, index)
        entries.append(
            PlayerEntry(
                rank=rank,
                label=f"{rank}. {player.first_name} {player.last_name}",
                player=player,
            )
        )
    return tuple(entries)


def build_view_state(
    result: PageResult,
    current_page: int,
    page_size: int,
    selected_position: str = ALL_PLAYERS,
) -> ViewState:
    """
    Build the view for a freshly loaded page.

    Args:
        result: Decoded page
        current_page: Page the result belongs to
        page_size: Players requested per page
        selected_position: Filter to apply, reset to "All players" when
            the page has no player at that position

    Returns:
        New ViewState
    """
    positions = derive_positions(result.players)
    if selected_position not in positions:
        selected_position = ALL_PLAYERS

    return ViewState(
        current_page=current_page,
        page_size=page_size,
        total_pages=result.total_pages,
        players=result.players,
        selected_position=selected_position,
        positions=positions,
        entries=derive_entries(
            result.players, selected_position, current_page, page_size
        ),
        loaded=True,
    )


def select_position(view: ViewState, position: str) -> ViewState:
    """Return a copy of the view filtered by another position."""
    if position not in view.positions:
        position = ALL_PLAYERS
    return replace(
        view,
        selected_position=position,
        entries=derive_entries(
            view.players, position, view.current_page, view.page_size
        ),
    )
