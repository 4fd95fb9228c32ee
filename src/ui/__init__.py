"""
UI components for NBA Players Browser.
Follows Atomic Design methodology: atoms -> molecules -> organisms -> templates -> screens.
"""

from .theme import Theme

__all__ = ["Theme"]
