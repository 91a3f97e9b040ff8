"""
Terminal capability profiles.

Two dialects are supported: the *legacy* profile (Windows consoles, SS3
``ESC O`` arrow keys, ASCII glyphs) and the *modern* profile (xterm-like
terminals, CSI ``ESC [`` arrow keys, Unicode glyphs).  The profile is
detected once and then passed explicitly to the decoder and view options.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class Profile(str, Enum):
    """Escape-sequence and glyph dialect of the attached terminal."""

    LEGACY = "legacy"
    MODERN = "modern"

    @classmethod
    def parse(cls, name: str) -> Profile:
        """Return the profile named *name* (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown profile {name!r} (expected one of: {valid})") from None


def detect_profile(platform: str | None = None) -> Profile:
    """
    Detect the profile for *platform* (defaults to the running interpreter).

    Windows-like platforms get the legacy profile; everything else is modern.
    """
    if platform is None:
        if os.name == "nt":
            return Profile.LEGACY
        platform = sys.platform
    if platform.lower().startswith("win"):
        return Profile.LEGACY
    return Profile.MODERN
