"""
Services layer for NBA Players Browser.
Handles the players API, page loading and view derivation.

Submodules are imported directly (``services.player_view`` etc.) since
they depend on ``state``, which itself imports ``services.players_api``.
"""
