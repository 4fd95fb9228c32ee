"""
UI Screens - Full page components with data binding.
The final layer of the atomic design hierarchy.
"""

from .players_screen import PlayersScreen
from .screen_manager import ScreenManager

__all__ = [
    'PlayersScreen',
    'ScreenManager',
]
