#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Exception types for the tile demo."""

from __future__ import annotations

from typing import Optional


class TileDemoError(Exception):
    """Base exception for demo-specific errors."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class AssetLoadError(TileDemoError):
    """Map, atlas or font could not be loaded. Fatal at startup."""


class UIConstructionError(TileDemoError):
    """A widget tree could not be built."""


class UIStateError(TileDemoError):
    """Illegal menu transition or settings change."""
