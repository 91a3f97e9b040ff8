"""Glyph themes for the prompt views."""
from __future__ import annotations

from termprompt.tui.theme.defaults import (
    GLYPHS,
    checkbox_view_options,
    list_view_options,
    question_mark,
    view_options,
)
from termprompt.tui.theme.loader import load_glyphs, resolve_glyphs
from termprompt.tui.theme.models import (
    GLYPH_KEYS,
    CheckboxViewOptions,
    ListViewOptions,
    ViewOptions,
)

__all__ = [
    "GLYPHS",
    "GLYPH_KEYS",
    "CheckboxViewOptions",
    "ListViewOptions",
    "ViewOptions",
    "checkbox_view_options",
    "list_view_options",
    "load_glyphs",
    "question_mark",
    "resolve_glyphs",
    "view_options",
]
