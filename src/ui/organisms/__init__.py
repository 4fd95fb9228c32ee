"""
UI Organisms - Complex components built from molecules.
"""

from .header import Header
from .menu_list import MenuList
from .modal_frame import ModalFrame

__all__ = [
    'Header',
    'MenuList',
    'ModalFrame',
]
