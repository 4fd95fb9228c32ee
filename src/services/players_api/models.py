"""Data models for the balldontlie players API."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Team:
    full_name: str = ""


@dataclass(frozen=True)
class Player:
    id: int
    first_name: str
    last_name: str
    position: str = ""  # "G", "F", "C", "G-F"... empty when the API has none
    team: Team = field(default_factory=Team)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class PageResult:
    """One page of players plus the pagination metadata returned with it."""

    players: Tuple[Player, ...]
    total_pages: int
