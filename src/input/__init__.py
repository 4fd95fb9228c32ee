"""
Input handling for NBA Players Browser.
Handles held keyboard navigation and mouse input.
"""

from .navigation import NavigationHandler
from .touch import TouchHandler

__all__ = [
    "NavigationHandler",
    "TouchHandler",
]
