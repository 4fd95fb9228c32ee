"""
Held-key navigation for NBA Players Browser.
Repeats Up/Down list movement with acceleration while a key is held.
"""

import pygame
from typing import Dict, Callable

from constants import (
    NAVIGATION_INITIAL_DELAY,
    NAVIGATION_START_RATE,
    NAVIGATION_MAX_RATE,
    NAVIGATION_ACCELERATION,
)


class NavigationHandler:
    """
    Handles continuous navigation for held arrow keys.

    The first step comes from the KEYDOWN event itself; after
    NAVIGATION_INITIAL_DELAY the direction repeats, starting slow and
    speeding up the longer the key stays down. Left/Right are not
    repeated because each step there starts a page load.
    """

    DIRECTIONS = ("up", "down")

    KEYS = {
        "up": pygame.K_UP,
        "down": pygame.K_DOWN,
    }

    def __init__(self):
        self._state: Dict[str, bool] = {d: False for d in self.DIRECTIONS}

        # Time when the key was first seen down, 0 when released
        self._start_time: Dict[str, int] = {d: 0 for d in self.DIRECTIONS}
        self._last_repeat: Dict[str, int] = {d: 0 for d in self.DIRECTIONS}

        # ms between repeats
        self._velocity: Dict[str, float] = {d: 0 for d in self.DIRECTIONS}

    def update(self) -> None:
        """
        Update held state from the keyboard.
        Should be called once per frame.
        """
        current_time = pygame.time.get_ticks()
        keys = pygame.key.get_pressed()

        for direction in self.DIRECTIONS:
            self._state[direction] = bool(keys[self.KEYS[direction]])

        self._update_timing(current_time)

    def _update_timing(self, current_time: int) -> None:
        for direction in self.DIRECTIONS:
            if self._state[direction]:
                if self._start_time[direction] == 0:
                    self._start_time[direction] = current_time
                    self._last_repeat[direction] = current_time
                    self._velocity[direction] = NAVIGATION_START_RATE
            else:
                self._start_time[direction] = 0
                self._last_repeat[direction] = 0
                self._velocity[direction] = 0

    def should_navigate(self, direction: str, current_time: int) -> bool:
        """
        Check if a repeat step is due for a held direction.

        Args:
            direction: Direction to check
            current_time: pygame ticks in ms

        Returns:
            True if navigation should trigger this frame
        """
        if not self._state[direction]:
            return False

        if current_time - self._start_time[direction] < NAVIGATION_INITIAL_DELAY:
            return False

        if current_time - self._last_repeat[direction] >= self._velocity[direction]:
            self._last_repeat[direction] = current_time
            self._velocity[direction] = max(
                self._velocity[direction] * NAVIGATION_ACCELERATION,
                NAVIGATION_MAX_RATE,
            )
            return True

        return False

    def handle_continuous(self, on_navigate: Callable[[str], None]) -> None:
        """
        Fire on_navigate for the held direction, if a repeat is due.

        Args:
            on_navigate: Callback function(direction)
        """
        current_time = pygame.time.get_ticks()
        for direction in self.DIRECTIONS:
            if self.should_navigate(direction, current_time):
                on_navigate(direction)
                break  # Only process one direction per frame

    def reset(self) -> None:
        """Reset all navigation state."""
        for direction in self.DIRECTIONS:
            self._state[direction] = False
            self._start_time[direction] = 0
            self._last_repeat[direction] = 0
            self._velocity[direction] = 0
