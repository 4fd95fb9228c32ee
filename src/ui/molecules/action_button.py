"""
Action button molecule - Button with label.
"""

import pygame
from typing import Optional

from ui.theme import Theme, Color, default_theme
from ui.atoms.button import Button
from ui.atoms.text import Text


class ActionButton:
    """
    Action button molecule.

    Combines the button shape with a centered label. A focused button
    gets an accent outline, a disabled one is drawn flat and greyed.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.button = Button(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        color: Optional[Color] = None,
        focused: bool = False,
        disabled: bool = False,
    ) -> pygame.Rect:
        """
        Render an action button.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            label: Button label
            color: Background color (default: surface_hover)
            focused: Keyboard focus is on this button
            disabled: Button cannot be activated

        Returns:
            Button rect
        """
        if disabled:
            color = self.theme.surface
            text_color = self.theme.text_disabled
        elif focused:
            color = self.theme.primary
            text_color = self.theme.background
        else:
            if color is None:
                color = self.theme.surface_hover
            text_color = self.theme.text_primary

        self.button.render(
            screen,
            rect,
            color=color,
            shadow=not disabled,
            border_color=self.theme.primary_dark if focused else None,
            border_width=2 if focused else 0,
        )

        self.text.render(
            screen,
            label,
            rect.center,
            color=text_color,
            size=self.theme.font_size_md,
            max_width=rect.width - self.theme.padding_sm * 2,
            align="center",
            valign="middle",
        )

        return rect


# Default instance
action_button = ActionButton()
