#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Immutable UI theme built once from the palette in ``config``."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict

import config

RGBA = Tuple[int, int, int, int]


def hex_to_color(value: str) -> RGBA:
    """'dff4ff' -> (223, 244, 255, 255). Raises ValueError on bad input."""
    raw = value.strip().lstrip("#")
    if len(raw) != 6:
        raise ValueError(f"expected 6 hex digits, got {value!r}")
    u = int(raw, 16)
    return (u & 0xFF0000) >> 16, (u & 0xFF00) >> 8, u & 0xFF, 255


class Insets(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


class UITheme(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    background: RGBA
    text_idle: RGBA
    text_disabled: RGBA
    label_idle: RGBA
    label_disabled: RGBA
    button_idle: RGBA
    button_disabled: RGBA
    button_hover_bg: RGBA
    button_press_bg: RGBA
    checkbox_on: RGBA
    checkbox_off: RGBA
    caret: RGBA
    disabled_caret: RGBA
    header_bg: RGBA = (0, 0, 0, 255)
    header_text: RGBA = (255, 255, 255, 255)
    progress_track: RGBA = (100, 100, 100, 255)
    progress_fill: RGBA = (255, 255, 100, 255)
    progress_label: RGBA = (0, 0, 0, 255)
    button_padding: Insets = Insets(left=30, right=30)
    title_bar_padding: Insets = Insets(left=30, right=5, top=6, bottom=5)
    panel_padding: Insets = Insets(left=30, right=30, top=20, bottom=20)
    checkbox_spacing: int = 10
    checkbox_size: int = 20
    font_name: str = "Arial"


def build_theme(font_name: str = "Arial") -> UITheme:
    text_idle = hex_to_color(config.TEXT_IDLE_COLOR)
    text_disabled = hex_to_color(config.TEXT_DISABLED_COLOR)
    return UITheme(
        background=hex_to_color(config.BACKGROUND_COLOR),
        text_idle=text_idle,
        text_disabled=text_disabled,
        label_idle=text_idle,
        label_disabled=text_disabled,
        button_idle=text_idle,
        button_disabled=text_disabled,
        button_hover_bg=hex_to_color(config.LIST_SELECTED_BACKGROUND),
        button_press_bg=hex_to_color(config.LIST_DISABLED_SELECTED_BACKGROUND),
        checkbox_on=hex_to_color(config.TEXT_INPUT_CARET_COLOR),
        checkbox_off=hex_to_color(config.LIST_DISABLED_SELECTED_BACKGROUND),
        caret=hex_to_color(config.TEXT_INPUT_CARET_COLOR),
        disabled_caret=hex_to_color(config.TEXT_INPUT_DISABLED_CARET_COLOR),
        font_name=font_name,
    )
