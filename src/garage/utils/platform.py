# -*- coding: utf-8 -*-
"""Host platform detection."""

from __future__ import annotations

import sys

from garage.constants import PLATFORM_DARWIN, PLATFORM_DEFAULT, PLATFORM_WIN32


def get_platform() -> str:
    """Return the platform identifier reported by the interpreter.

    Falls back to the Windows identifier when nothing is reported.
    """
    platform = getattr(sys, "platform", None)
    if platform:
        return platform
    return PLATFORM_DEFAULT


def is_windows(platform: str | None = None) -> bool:
    """Return True if `platform` (default: the host) is Windows."""
    if platform is None:
        platform = get_platform()
    return platform == PLATFORM_WIN32


def is_darwin(platform: str | None = None) -> bool:
    """Return True if `platform` (default: the host) is macOS."""
    if platform is None:
        platform = get_platform()
    return platform == PLATFORM_DARWIN
