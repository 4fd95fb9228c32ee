"""
UI Modal Screens - Modal dialog page components.
"""

from .position_filter_modal import PositionFilterModal
from .loading_modal import LoadingModal
from .error_modal import ErrorModal

__all__ = [
    'PositionFilterModal',
    'LoadingModal',
    'ErrorModal',
]
