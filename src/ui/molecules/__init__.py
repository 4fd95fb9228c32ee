"""
UI Molecules - Combinations of atoms.
"""

from .action_button import ActionButton
from .menu_item import MenuItem

__all__ = [
    'ActionButton',
    'MenuItem',
]
