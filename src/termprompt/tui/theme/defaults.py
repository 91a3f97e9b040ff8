"""
Built-in glyph sets for the legacy and modern profiles.

Legacy terminals get plain ASCII glyphs; modern terminals get Unicode
ones.  Colours are the same for both.
"""

from __future__ import annotations

from termprompt.profile import Profile
from termprompt.tui.ansi import FG, style
from termprompt.tui.theme.models import CheckboxViewOptions, ListViewOptions, ViewOptions

# ---------------------------------------------------------------------------
# Raw glyph text per profile
# ---------------------------------------------------------------------------

GLYPHS: dict[Profile, dict[str, str]] = {
    Profile.LEGACY: {
        "cursor": " > ",
        "checked": "(*) ",
        "unchecked": "( ) ",
    },
    Profile.MODERN: {
        "cursor": " ❯ ",
        "checked": "◉ ",
        "unchecked": "◯ ",
    },
}

NON_CURSOR = "   "


def question_mark() -> str:
    """The bold green ``?`` drawn before every message."""
    return style("?", fg=FG.GREEN, bold=True)


def view_options(profile: Profile, **overrides: str) -> ViewOptions:
    """Default options for prompts without choices (confirm, input)."""
    return ViewOptions(question_mark_prefix=question_mark()).replace(**overrides)


def list_view_options(profile: Profile, **overrides: str) -> ListViewOptions:
    """Default list glyphs for *profile*, with optional *overrides*."""
    glyphs = GLYPHS[profile]
    options = ListViewOptions(
        question_mark_prefix=question_mark(),
        cursor=style(glyphs["cursor"], fg=FG.BRIGHT_CYAN),
        non_cursor=NON_CURSOR,
    )
    return options.replace(**overrides)


def checkbox_view_options(profile: Profile, **overrides: str) -> CheckboxViewOptions:
    """Default checkbox glyphs for *profile*, with optional *overrides*."""
    glyphs = GLYPHS[profile]
    options = CheckboxViewOptions(
        question_mark_prefix=question_mark(),
        cursor=style(glyphs["cursor"], fg=FG.BRIGHT_CYAN),
        non_cursor=NON_CURSOR,
        checked=style(glyphs["checked"], fg=FG.GREEN),
        unchecked=glyphs["unchecked"],
    )
    return options.replace(**overrides)
