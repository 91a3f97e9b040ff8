"""
View option models.

Each widget receives a view-options object holding the already-styled
glyphs it draws around the message and each choice row.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

# ---------------------------------------------------------------------------
# Glyph keys
# ---------------------------------------------------------------------------

GLYPH_KEYS: list[str] = [
    "question_mark_prefix",
    "cursor",
    "non_cursor",
    "checked",
    "unchecked",
]
"""Every glyph name a theme file may override."""


# ---------------------------------------------------------------------------
# Option dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ViewOptions:
    """
    Styling shared by every prompt.

    Attributes
    ----------
    question_mark_prefix:
        Glyph written before the prompt message.
    """

    question_mark_prefix: str = "?"

    def replace(self, **overrides: str) -> ViewOptions:
        """Return a copy with the known glyphs in *overrides* replaced."""
        known = {f.name for f in fields(self)}
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if k in known})
        return type(self)(**values)


@dataclass(frozen=True)
class ListViewOptions(ViewOptions):
    """Glyphs for single-choice lists."""

    cursor: str = " > "
    non_cursor: str = "   "


@dataclass(frozen=True)
class CheckboxViewOptions(ListViewOptions):
    """Glyphs for multi-select lists."""

    checked: str = "(*) "
    unchecked: str = "( ) "
