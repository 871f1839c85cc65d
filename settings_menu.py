#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""arcade.gui overlay: status header, progress bar and the modal main menu.

The overlay owns widgets only. Every state change goes through ``UIState`` so
the menu logic stays testable without a window.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import arcade
from arcade.gui import (
    UIAnchorLayout,
    UIBoxLayout,
    UIDraggableMixin,
    UIEvent,
    UIFlatButton,
    UILabel,
    UIManager,
    UIMouseDragEvent,
    UIMouseFilterMixin,
    UIMousePressEvent,
    UIMouseReleaseEvent,
    UITextureToggle,
    UIWidget,
)
from pyglet.event import EVENT_HANDLED

from config import (
    HEADER_FONT_SIZE,
    MENU_FONT_SIZE,
    MENU_MAX_H,
    MENU_MAX_W,
    MENU_MIN_H,
    MENU_MIN_W,
    MENU_RESIZE_GRIP,
    MENU_TITLE_BAR_H,
    PROGRESS_MAX,
    PROGRESS_MIN,
    PROGRESS_MIN_H,
    PROGRESS_MIN_W,
    PROGRESS_TRACK_PAD,
    PROGRESS_VALUE,
    TITLE_FONT_SIZE,
)
from errors import AssetLoadError, UIConstructionError
from theme import UITheme
from ui_state import UIState, main_menu_rect

logger = logging.getLogger("tile_demo.menu")

FONT_CANDIDATES: tuple[str, ...] = (
    "Go",
    "DejaVu Sans",
    "Noto Sans",
    "Liberation Sans",
    "Arial",
    "sans-serif",
)


def _pick_font_name() -> str:
    """Pick the first installed font from the candidates."""
    import pyglet

    for name in FONT_CANDIDATES:
        if pyglet.font.have_font(name):
            return name
    return FONT_CANDIDATES[-1]


def load_font(path: str | Path | None) -> str:
    """Register a TTF file and return its family name, or pick a system font."""
    if path is None:
        return _pick_font_name()
    from PIL import ImageFont

    try:
        family, _style = ImageFont.truetype(str(path), size=12).getname()
        arcade.load_font(Path(path))
    except (OSError, ValueError) as exc:
        raise AssetLoadError(f"cannot load font {path}: {exc}") from exc
    return family


class UIProgressBar(UIWidget):
    def __init__(
        self,
        *,
        min_value: float,
        max_value: float,
        value: float,
        track_color,
        fill_color,
        track_padding: int = 0,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.min_value = min_value
        self.max_value = max_value
        self.value = value
        self.track_color = track_color
        self.fill_color = fill_color
        self.track_padding = track_padding

    @property
    def fraction(self) -> float:
        span = self.max_value - self.min_value
        if span <= 0:
            return 0.0
        return min(1.0, max(0.0, (self.value - self.min_value) / span))

    def do_render(self, surface) -> None:
        self.prepare_render(surface)
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, self.track_color)
        fill_w = self.width * self.fraction
        if fill_w > 0:
            pad = self.track_padding
            arcade.draw_lrbt_rectangle_filled(0, fill_w, pad, self.height - pad, self.fill_color)


class ModalBackdrop(UIMouseFilterMixin, UIWidget):
    """Full-window widget that swallows mouse input behind the menu."""


class SettingsPanel(UIDraggableMixin, UIMouseFilterMixin, UIAnchorLayout):
    """Draggable panel with a bottom-right resize grip."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._resizing = False

    def _in_grip(self, x: float, y: float) -> bool:
        return self.right - MENU_RESIZE_GRIP <= x <= self.right and self.bottom <= y <= self.bottom + MENU_RESIZE_GRIP

    def on_event(self, event: UIEvent) -> Optional[bool]:
        if isinstance(event, UIMousePressEvent) and self._in_grip(event.x, event.y):
            self._resizing = True
            return EVENT_HANDLED
        if isinstance(event, UIMouseDragEvent) and self._resizing:
            new_w = min(MENU_MAX_W, max(MENU_MIN_W, self.width + event.dx))
            new_h = min(MENU_MAX_H, max(MENU_MIN_H, self.height - event.dy))
            # keep the top-left corner fixed
            self.rect = arcade.LBWH(self.left, self.top - new_h, new_w, new_h)
            self.trigger_full_render()
            return EVENT_HANDLED
        if isinstance(event, UIMouseReleaseEvent) and self._resizing:
            self._resizing = False
            logger.info("Resize: %s", self.rect)
            return EVENT_HANDLED

        before = self.rect
        handled = super().on_event(event)
        if isinstance(event, UIMouseDragEvent) and self.rect != before:
            logger.info("Move: %s", self.rect)
        return handled


class SettingsOverlay:
    def __init__(self, window, ui_state: UIState, theme: UITheme):
        self.window = window
        self.ui_state = ui_state
        self.theme = theme
        self.manager = UIManager(window)
        self._pointer: Optional[Tuple[float, float]] = None
        self._menu_widgets: List[UIWidget] = []
        self.panel: Optional[SettingsPanel] = None
        self.close_button: Optional[UIFlatButton] = None
        self.checkboxes: Dict[str, UITextureToggle] = {}
        try:
            self._build_root()
            self._checked_texture = arcade.make_soft_square_texture(theme.checkbox_size, theme.checkbox_on, outer_alpha=255)
            self._unchecked_texture = arcade.make_soft_square_texture(theme.checkbox_size, theme.checkbox_off, outer_alpha=255)
        except (TypeError, ValueError, AttributeError) as exc:
            raise UIConstructionError(f"cannot build overlay: {exc}") from exc
        self.manager.enable()

    def _build_root(self) -> None:
        theme = self.theme
        root = UIAnchorLayout().with_padding(top=5, right=5, bottom=5, left=5)

        self.header = UIAnchorLayout(size_hint=(1, None), height=56).with_background(color=theme.header_bg)
        self.header_label = UILabel(
            text="Game Demo!",
            font_name=theme.font_name,
            font_size=HEADER_FONT_SIZE,
            text_color=theme.header_text,
            multiline=True,
            width=320,
            align="center",
        )
        self.header.add(self.header_label, anchor_x="center", anchor_y="center")
        root.add(self.header, anchor_x="center", anchor_y="top")

        self.progress_bar = UIProgressBar(
            min_value=PROGRESS_MIN,
            max_value=PROGRESS_MAX,
            value=PROGRESS_VALUE,
            track_color=theme.progress_track,
            fill_color=theme.progress_fill,
            track_padding=PROGRESS_TRACK_PAD,
            size_hint=(1, None),
            size_hint_min=(PROGRESS_MIN_W, PROGRESS_MIN_H),
            height=PROGRESS_MIN_H,
        )
        root.add(self.progress_bar, anchor_x="center", anchor_y="bottom")
        percent = UILabel(
            text=f"{round(self.progress_bar.fraction * 100)}%",
            font_name=theme.font_name,
            font_size=HEADER_FONT_SIZE,
            text_color=theme.progress_label,
        )
        root.add(percent, anchor_x="center", anchor_y="bottom")

        self.manager.add(root)

    def _tracked_widgets(self) -> List[UIWidget]:
        tracked: List[UIWidget] = [self.header, self.progress_bar]
        if self.panel is not None:
            tracked.append(self.panel)
        return tracked

    @property
    def hovered(self) -> bool:
        if self._pointer is None:
            return False
        return any(w.rect.point_in_rect(self._pointer) for w in self._tracked_widgets())

    def update(self, pointer: Optional[Tuple[float, float]]) -> None:
        # arcade.gui already received this tick's events through the window
        self._pointer = pointer

    def set_header_text(self, text: str) -> None:
        if self.header_label.text != text:
            self.header_label.text = text

    def draw(self) -> None:
        self.manager.draw()

    def _button_styles(self) -> dict:
        theme = self.theme
        style = UIFlatButton.UIStyle
        return {
            "normal": style(font_name=theme.font_name, font_size=MENU_FONT_SIZE, font_color=theme.button_idle, bg=theme.background),
            "hover": style(font_name=theme.font_name, font_size=MENU_FONT_SIZE, font_color=theme.button_idle, bg=theme.button_hover_bg),
            "press": style(font_name=theme.font_name, font_size=MENU_FONT_SIZE, font_color=theme.button_idle, bg=theme.button_press_bg),
            "disabled": style(font_name=theme.font_name, font_size=MENU_FONT_SIZE, font_color=theme.button_disabled, bg=theme.background),
        }

    def _labeled_checkbox(self, text: str, checked: bool, on_toggle) -> UIBoxLayout:
        theme = self.theme
        row = UIBoxLayout(vertical=False, space_between=theme.checkbox_spacing)
        toggle = UITextureToggle(
            on_texture=self._checked_texture,
            off_texture=self._unchecked_texture,
            value=checked,
            width=theme.checkbox_size,
            height=theme.checkbox_size,
        )

        @toggle.event("on_change")
        def _changed(event) -> None:
            logger.info("%s -> %s", text, on_toggle())

        self.checkboxes[text] = toggle
        row.add(toggle)
        row.add(UILabel(text=text, font_name=theme.font_name, font_size=MENU_FONT_SIZE, text_color=theme.label_idle))
        return row

    def _build_panel(self) -> SettingsPanel:
        theme = self.theme
        settings = self.ui_state.settings
        left, top, width, height = main_menu_rect(self.window.width, self.window.height)
        panel = SettingsPanel(
            x=left,
            y=self.window.height - top - height,
            width=width,
            height=height,
            size_hint=None,
        ).with_background(color=theme.background)

        title_bar = UIAnchorLayout(size_hint=(1, None), height=MENU_TITLE_BAR_H).with_background(color=theme.background)
        title_bar.add(
            UILabel(text="Main Menu", font_name=theme.font_name, font_size=TITLE_FONT_SIZE, text_color=theme.text_idle),
            anchor_x="left",
            align_x=theme.title_bar_padding.left,
            anchor_y="center",
        )
        close_button = UIFlatButton(
            text="X",
            width=MENU_TITLE_BAR_H + theme.button_padding.left,
            height=MENU_TITLE_BAR_H,
            style=self._button_styles(),
        )

        @close_button.event("on_click")
        def _close(event) -> None:
            self.close_main_menu()

        self.close_button = close_button

        title_bar.add(close_button, anchor_x="right", align_x=-theme.title_bar_padding.right, anchor_y="center")
        panel.add(title_bar, anchor_x="center", anchor_y="top")

        content = UIBoxLayout(vertical=True, align="left", space_between=15)
        content.add(self._labeled_checkbox("Show FPS", settings.show_fps, self.ui_state.toggle_show_fps))
        content.add(self._labeled_checkbox("VSynch", settings.vsync, self.ui_state.toggle_vsync))
        panel.add(
            content,
            anchor_x="left",
            align_x=theme.panel_padding.left,
            anchor_y="top",
            align_y=-(MENU_TITLE_BAR_H + theme.panel_padding.top),
        )
        return panel

    def open_main_menu(self) -> None:
        try:
            backdrop = ModalBackdrop(size_hint=(1, 1))
            panel = self._build_panel()
        except (TypeError, ValueError, AttributeError) as exc:
            raise UIConstructionError(f"cannot build main menu: {exc}") from exc
        self.manager.add(backdrop, layer=1)
        self.manager.add(panel, layer=1)
        self._menu_widgets = [backdrop, panel]
        self.panel = panel

    def close_main_menu(self) -> None:
        self.ui_state.close_main_menu()
        self._remove_menu()

    def _remove_menu(self) -> None:
        for widget in self._menu_widgets:
            self.manager.remove(widget)
        self._menu_widgets = []
        self.panel = None
        self.close_button = None
        self.checkboxes = {}
