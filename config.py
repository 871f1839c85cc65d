#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Game configuration.

Rule: this file holds constants/settings only (no logic).
"""

# --- Window ---
SCREEN_W, SCREEN_H = 920, 920
TITLE = "Icosahedron Games: Tower Defense"
TPS = 60

# --- World ---
TILE_SIZE = 16
TILE_MAP_WIDTH = 15
ZOOM = 4.0

# --- Player ---
PLAYER_SPEED = 100.0       # world units/s
MIN_DELTA_SECONDS = 0.001

# --- Rate meter ---
RATE_SAMPLE_FRAMES = 60

# --- Main menu panel ---
MENU_W, MENU_H = 550, 250
MENU_MIN_W, MENU_MIN_H = 500, 200
MENU_MAX_W, MENU_MAX_H = 700, 400
MENU_TITLE_BAR_H = 30
MENU_RESIZE_GRIP = 14

# --- Header / progress bar ---
HEADER_FONT_SIZE = 18
TITLE_FONT_SIZE = 24
MENU_FONT_SIZE = 20
PROGRESS_MIN, PROGRESS_MAX, PROGRESS_VALUE = 0, 10, 7
PROGRESS_MIN_W, PROGRESS_MIN_H = 200, 20
PROGRESS_TRACK_PAD = 2

# --- Theme (hex RGB) ---
BACKGROUND_COLOR = "131a22"
TEXT_IDLE_COLOR = "dff4ff"
TEXT_DISABLED_COLOR = "5a7a91"
LIST_SELECTED_BACKGROUND = "4b687a"
LIST_DISABLED_SELECTED_BACKGROUND = "2a3944"
TEXT_INPUT_CARET_COLOR = "e7c34b"
TEXT_INPUT_DISABLED_CARET_COLOR = "766326"
