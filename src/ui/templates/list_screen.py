"""
List screen template - Layout for list-based screens.
"""

import pygame
from typing import List, Tuple, Optional, Any, Callable

from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.organisms.header import Header
from ui.organisms.menu_list import MenuList
from ui.molecules.action_button import ActionButton
from constants import HEADER_HEIGHT, FOOTER_HEIGHT


class ListScreenTemplate:
    """
    List screen template.

    Header on top, scrollable list in the middle and a row of
    action buttons along the bottom.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.header = Header(theme)
        self.menu_list = MenuList(theme)
        self.action_button = ActionButton(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        items: List[Any],
        highlighted: int,
        buttons: List[Tuple[str, bool]],
        focused_button: Optional[int] = None,
        subtitle: Optional[str] = None,
        chip_text: Optional[str] = None,
        chip_active: bool = False,
        empty_message: str = "",
        item_height: int = 50,
        item_spacing: int = 0,
        get_label: Optional[Callable[[Any], str]] = None,
        get_secondary: Optional[Callable[[Any], str]] = None,
        show_highlight: bool = True,
    ) -> Tuple[Optional[pygame.Rect], List[pygame.Rect], int, List[pygame.Rect]]:
        """
        Render a list screen with bottom action buttons.

        Args:
            screen: Surface to render to
            title: Screen title
            items: List of items
            highlighted: Highlighted index
            buttons: (label, enabled) per bottom button
            focused_button: Index of the button holding keyboard focus
            subtitle: Optional subtitle under the title
            chip_text: Optional header chip label
            chip_active: Draw the chip in accent color
            empty_message: Shown when there are no items
            item_height: Item height
            item_spacing: Gap between items
            get_label: Label extraction function
            get_secondary: Secondary text function
            show_highlight: Draw the list highlight

        Returns:
            Tuple of (chip_rect, item_rects, scroll_offset, button_rects)
        """
        _, chip_rect = self.header.render(
            screen,
            title,
            subtitle=subtitle,
            chip_text=chip_text,
            chip_active=chip_active,
        )

        padding = self.theme.padding_sm
        footer_height = FOOTER_HEIGHT if buttons else 0
        content_rect = pygame.Rect(
            padding,
            HEADER_HEIGHT + padding,
            screen.get_width() - padding * 2,
            screen.get_height() - HEADER_HEIGHT - footer_height - padding * 2,
        )

        if items:
            item_rects, scroll_offset = self.menu_list.render(
                screen,
                content_rect,
                items,
                highlighted,
                item_height=item_height,
                get_label=get_label,
                get_secondary=get_secondary,
                item_spacing=item_spacing,
                show_highlight=show_highlight,
            )
        else:
            item_rects, scroll_offset = [], 0
            if empty_message:
                self.text.render(
                    screen,
                    empty_message,
                    content_rect.center,
                    color=self.theme.text_secondary,
                    align="center",
                    valign="middle",
                )

        button_rects = self._render_buttons(screen, buttons, focused_button)
        return chip_rect, item_rects, scroll_offset, button_rects

    def _render_buttons(
        self,
        screen: pygame.Surface,
        buttons: List[Tuple[str, bool]],
        focused_button: Optional[int],
    ) -> List[pygame.Rect]:
        if not buttons:
            return []

        footer_top = screen.get_height() - FOOTER_HEIGHT
        pygame.draw.rect(
            screen,
            self.theme.surface,
            pygame.Rect(0, footer_top, screen.get_width(), FOOTER_HEIGHT),
        )

        width = self.theme.button_width
        height = self.theme.button_height
        gap = self.theme.padding_md
        total_width = len(buttons) * width + (len(buttons) - 1) * gap
        x = (screen.get_width() - total_width) // 2
        y = footer_top + (FOOTER_HEIGHT - height) // 2

        button_rects = []
        for i, (label, enabled) in enumerate(buttons):
            rect = pygame.Rect(x, y, width, height)
            self.action_button.render(
                screen,
                rect,
                label,
                focused=(i == focused_button and enabled),
                disabled=not enabled,
            )
            button_rects.append(rect)
            x += width + gap

        return button_rects


# Default instance
list_screen_template = ListScreenTemplate()
