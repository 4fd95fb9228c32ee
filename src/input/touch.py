"""
Mouse input handling for NBA Players Browser.
Turns raw mouse events into clicks and list scroll steps.
"""

import pygame
from typing import Optional, Tuple, Callable
from dataclasses import dataclass

from constants import (
    SCROLL_THRESHOLD,
    TAP_TIME_THRESHOLD,
    SCROLL_SENSITIVITY,
    WHEEL_STEP,
)


@dataclass
class TouchState:
    """State for tracking a mouse press."""
    start_pos: Optional[Tuple[int, int]] = None
    last_pos: Optional[Tuple[int, int]] = None
    start_time: int = 0
    is_scrolling: bool = False
    scroll_accumulated: float = 0  # Fractional rows not yet emitted


class TouchHandler:
    """
    Handles mouse input.

    Supports:
    - Click detection (short press without movement)
    - Drag scrolling
    - Wheel scrolling
    """

    def __init__(self):
        self._state = TouchState()

    @property
    def is_scrolling(self) -> bool:
        """Check if currently in a drag gesture."""
        return self._state.is_scrolling

    def handle_mouse_down(self, event: pygame.event.Event) -> Tuple[int, int]:
        """
        Handle mouse button down event.

        Args:
            event: MOUSEBUTTONDOWN event

        Returns:
            Press position
        """
        if event.button == 1:  # Left mouse button
            self._state.start_pos = event.pos
            self._state.last_pos = event.pos
            self._state.start_time = pygame.time.get_ticks()
            self._state.is_scrolling = False

        return event.pos

    def handle_mouse_up(
        self,
        event: pygame.event.Event,
        on_click: Optional[Callable[[Tuple[int, int]], None]] = None
    ) -> Optional[Tuple[int, int]]:
        """
        Handle mouse button up event.

        Args:
            event: MOUSEBUTTONUP event
            on_click: Optional callback for click events

        Returns:
            Click position if it was a click, None otherwise
        """
        if event.button != 1 or not self._state.start_pos:
            return None

        x, y = event.pos
        dx = x - self._state.start_pos[0]
        dy = y - self._state.start_pos[1]
        distance = (dx * dx + dy * dy) ** 0.5
        time_elapsed = pygame.time.get_ticks() - self._state.start_time

        click_pos = None
        if (distance < SCROLL_THRESHOLD and
                time_elapsed < TAP_TIME_THRESHOLD and
                not self._state.is_scrolling):
            click_pos = self._state.start_pos
            if on_click:
                on_click(click_pos)

        self.reset()
        return click_pos

    def handle_mouse_motion(
        self,
        event: pygame.event.Event,
        on_scroll: Optional[Callable[[float], None]] = None
    ) -> float:
        """
        Handle mouse motion event (drag scrolling).

        Args:
            event: MOUSEMOTION event
            on_scroll: Optional callback for scroll events

        Returns:
            Whole rows scrolled by this event (positive = up)
        """
        if not self._state.start_pos or not self._state.last_pos:
            return 0

        x, y = event.pos
        dx_total = x - self._state.start_pos[0]
        dy_total = y - self._state.start_pos[1]
        total_distance = (dx_total * dx_total + dy_total * dy_total) ** 0.5
        dy_motion = y - self._state.last_pos[1]

        if total_distance > SCROLL_THRESHOLD:
            self._state.is_scrolling = True

        rows = 0
        if self._state.is_scrolling and dy_motion:
            # Dragging down reveals earlier rows
            self._state.scroll_accumulated += dy_motion * SCROLL_SENSITIVITY
            rows = int(self._state.scroll_accumulated)
            if rows:
                self._state.scroll_accumulated -= rows
                if on_scroll:
                    on_scroll(rows)

        self._state.last_pos = (x, y)
        return rows

    def handle_mouse_wheel(
        self,
        event: pygame.event.Event,
        on_scroll: Optional[Callable[[float], None]] = None
    ) -> float:
        """
        Handle mouse wheel event.

        Args:
            event: MOUSEWHEEL event
            on_scroll: Optional callback for scroll events

        Returns:
            Scroll amount in rows (positive = up)
        """
        amount = event.y * WHEEL_STEP
        if on_scroll and amount:
            on_scroll(amount)
        return amount

    def reset(self) -> None:
        """Reset all mouse state."""
        self._state = TouchState()
