"""
ANSI escape sequence utilities for prompt rendering.

Provides the colour constants, text styling and cursor/line control
primitives that widgets and the render surface compose into frames.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

ESC = "\033"
CSI = f"{ESC}["
RESET = f"{CSI}0m"


# ---------------------------------------------------------------------------
# Foreground colors (30-37, 90-97)
# ---------------------------------------------------------------------------

class FG:
    """ANSI foreground colors used by the prompt views."""

    RED = f"{CSI}31m"
    GREEN = f"{CSI}32m"
    CYAN = f"{CSI}36m"
    BRIGHT_BLACK = f"{CSI}90m"
    BRIGHT_CYAN = f"{CSI}96m"

    @classmethod
    def by_name(cls, name: str) -> str:
        """Look up a colour by name, e.g. ``"bright_cyan"``."""
        value = getattr(cls, name.upper(), None)
        if not isinstance(value, str):
            raise ValueError(f"Unknown foreground color: {name!r}")
        return value


# ---------------------------------------------------------------------------
# Text styling
# ---------------------------------------------------------------------------

_STYLE_CODES: dict[str, int] = {
    "bold": 1,
    "dim": 2,
}


def style(
    text: str,
    *,
    fg: str | None = None,
    bold: bool = False,
    dim: bool = False,
) -> str:
    """
    Apply ANSI styling to *text*.

    Parameters
    ----------
    text:
        The string to style.
    fg:
        Foreground color, an already-formed sequence such as ``FG.CYAN``.
    bold, dim:
        Boolean attribute flags.

    Returns
    -------
    str
        The text wrapped in the requested escape sequences with a trailing
        ``RESET``, or *text* unchanged when no styling was requested.
    """
    parts: list[str] = []

    if fg is not None:
        parts.append(fg)

    attrs = {"bold": bold, "dim": dim}
    for attr_name, enabled in attrs.items():
        if enabled:
            parts.append(f"{CSI}{_STYLE_CODES[attr_name]}m")

    if not parts:
        return text

    prefix = "".join(parts)
    return f"{prefix}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences from *text*."""
    out: list[str] = []
    i = 0
    while i < len(text):
        if text.startswith(CSI, i):
            i += len(CSI)
            # Parameters and intermediates run until the final byte @..~
            while i < len(text) and not ("@" <= text[i] <= "~"):
                i += 1
            i += 1
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


# ---------------------------------------------------------------------------
# Cursor movement
# ---------------------------------------------------------------------------

def cursor_to_column(col: int = 0) -> str:
    """Move cursor to 0-based column *col* on the current row."""
    return f"{CSI}{col + 1}G"


def cursor_up_line(n: int = 1) -> str:
    """Move cursor to the start of the line *n* rows up."""
    return f"{CSI}{n}F"


def cursor_back(n: int = 1) -> str:
    """Move cursor left by *n* columns."""
    return f"{CSI}{n}D"


def application_cursor_keys(enabled: bool = True) -> str:
    """Switch arrow keys to send ``ESC O`` (enabled) or ``ESC [`` (disabled)."""
    return f"{CSI}?1{'h' if enabled else 'l'}"


# ---------------------------------------------------------------------------
# Screen / line clearing
# ---------------------------------------------------------------------------

def erase_line() -> str:
    """Erase the entire current line."""
    return f"{CSI}2K"


def clear_screen() -> str:
    """Clear the entire screen and move cursor to top-left."""
    return f"{CSI}2J{CSI}H"
