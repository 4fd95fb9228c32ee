"""
UI Templates - Page layouts.
Compositions of organisms into complete page structures.
"""

from .list_screen import ListScreenTemplate
from .modal_template import ModalTemplate

__all__ = [
    "ListScreenTemplate",
    "ModalTemplate",
]
