"""balldontlie players API: records, request builder, fetcher and decoder."""

from .models import (  # noqa: F401
    Player,
    Team,
    PageResult,
)
from .client import (  # noqa: F401
    PlayersApiClient,
    PlayersApiError,
    FetchError,
    DecodeError,
    build_players_url,
    decode_page,
)
