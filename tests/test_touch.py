"""Tests for mouse click and scroll handling."""

import os
import sys

import pygame

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from input.touch import TouchHandler


def _down(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def _up(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=pos)


def _motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos)


def test_drag_scrolls_whole_rows_scaled_by_sensitivity():
    handler = TouchHandler()
    scrolled = []

    handler.handle_mouse_down(_down((100, 300)))
    for step in range(1, 21):
        handler.handle_mouse_motion(_motion((100, 300 - 2 * step)), scrolled.append)

    # 36px past the threshold at 0.08 rows per pixel is under three rows
    assert all(isinstance(rows, int) for rows in scrolled)
    assert sum(scrolled) == -2


def test_drag_down_scrolls_up():
    handler = TouchHandler()
    scrolled = []

    handler.handle_mouse_down(_down((100, 100)))
    handler.handle_mouse_motion(_motion((100, 140)), scrolled.append)

    assert scrolled == [3]


def test_release_discards_leftover_drag():
    handler = TouchHandler()
    scrolled = []

    handler.handle_mouse_down(_down((100, 100)))
    handler.handle_mouse_motion(_motion((100, 110)), scrolled.append)
    handler.handle_mouse_up(_up((100, 110)))
    handler.handle_mouse_down(_down((100, 100)))
    handler.handle_mouse_motion(_motion((100, 106)), scrolled.append)

    assert scrolled == []


def test_wheel_scrolls_fixed_step():
    handler = TouchHandler()
    scrolled = []

    handler.handle_mouse_wheel(
        pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1), scrolled.append
    )

    assert scrolled == [3]


def test_short_press_is_click():
    handler = TouchHandler()
    clicks = []

    handler.handle_mouse_down(_down((50, 60)))
    handler.handle_mouse_up(_up((51, 60)), clicks.append)

    assert clicks == [(50, 60)]
    assert not handler.is_scrolling


def test_drag_is_not_click():
    handler = TouchHandler()
    clicks = []

    handler.handle_mouse_down(_down((50, 60)))
    handler.handle_mouse_motion(_motion((50, 90)))
    handler.handle_mouse_up(_up((50, 90)), clicks.append)

    assert clicks == []
