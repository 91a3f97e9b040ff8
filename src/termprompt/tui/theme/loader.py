"""Glyph override loading."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from termprompt.tui.ansi import FG, style
from termprompt.tui.theme.models import GLYPH_KEYS


def resolve_glyphs(raw: dict[str, Any]) -> dict[str, str]:
    """Turn a raw glyph mapping into styled glyph strings.

    Each value is either a plain string used verbatim, or a mapping with
    ``text`` and optional ``fg`` (colour name) and ``bold`` keys::

        cursor:
          text: " -> "
          fg: bright_cyan
        unchecked: "[ ] "

    Unknown glyph names are rejected.
    """
    glyphs: dict[str, str] = {}
    for key, value in raw.items():
        if key not in GLYPH_KEYS:
            raise ValueError(f"Unknown glyph {key!r} (expected one of: {', '.join(GLYPH_KEYS)})")
        if isinstance(value, str):
            glyphs[key] = value
        elif isinstance(value, dict):
            fg = value.get("fg")
            glyphs[key] = style(
                str(value.get("text", "")),
                fg=FG.by_name(fg) if fg else None,
                bold=bool(value.get("bold", False)),
            )
        else:
            raise ValueError(f"Glyph {key!r} must be a string or a mapping, got {type(value).__name__}")
    return glyphs


def load_glyphs(path: Path) -> dict[str, str]:
    """Load glyph overrides from a JSON or YAML file."""
    text = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix.lower() == ".json":
        data: Any = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Glyph file {path} must contain a mapping")
    return resolve_glyphs(data)
