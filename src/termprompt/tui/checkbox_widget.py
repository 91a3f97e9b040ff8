"""
Multi-select checkbox prompt.

Space toggles the choice under the cursor, Enter submits.  The maximum
selection count is enforced on every toggle; the minimum only when the
user tries to submit.  Violations show a transient error line and leave
the widget interacting.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from io import StringIO
from typing import TypeVar

from termprompt.logging import get_logger
from termprompt.profile import Profile
from termprompt.tui.ansi import FG, style
from termprompt.tui.component import PAGINATION_INFO, Choice, Pager, Widget, check_choices
from termprompt.tui.keys import Event, EventKind
from termprompt.tui.theme import CheckboxViewOptions, checkbox_view_options

logger = get_logger("tui.checkbox")

T = TypeVar("T")


class CheckboxWidget(Widget[list[T]]):
    """
    Pick between *min_selection* and *max_selection* of *choices*.

    Parameters
    ----------
    message:
        Question shown after the ``?`` prefix.
    choices:
        Sequence of :class:`Choice`; may be empty.
    hint:
        Dimmed text shown next to the message while interacting.
    min_selection:
        Fewest choices that may be submitted.
    max_selection:
        Most choices that may be checked at once; ``None`` for no limit.
    page_size:
        Rows shown at once; ``None`` shows every choice.
    view_options:
        Glyphs to draw with; defaults to the *profile* glyph set.
    """

    def __init__(
        self,
        message: str,
        choices: Sequence[Choice[T]],
        *,
        hint: str = "",
        min_selection: int = 0,
        max_selection: int | None = None,
        page_size: int | None = None,
        view_options: CheckboxViewOptions | None = None,
        profile: Profile = Profile.MODERN,
    ) -> None:
        super().__init__()
        if min_selection < 0:
            raise ValueError(f"min_selection must not be negative, got {min_selection}")
        if max_selection is not None and max_selection < min_selection:
            raise ValueError(
                f"max_selection ({max_selection}) is smaller than min_selection ({min_selection})"
            )
        self.message = message
        self.hint = hint
        self.choices = check_choices(choices)
        self.min_selection = min_selection
        self.max_selection = max_selection if max_selection is not None else sys.maxsize
        self._pager = Pager(len(self.choices), page_size)
        self._view = view_options or checkbox_view_options(profile)
        self._selected: set[int] = set()
        self._value: list[T] = []
        self._error = ""

    @property
    def cursor(self) -> int:
        return self._pager.cursor

    @property
    def window_start(self) -> int:
        return self._pager.start

    @property
    def selected_indices(self) -> frozenset[int]:
        return frozenset(self._selected)

    @property
    def error_message(self) -> str:
        return self._error

    def value(self) -> list[T]:
        return list(self._value)

    def consume(self, event: Event) -> None:
        self._error = ""
        if self._pager.move(event):
            return
        if event.kind is EventKind.SPACE:
            self._toggle()
        elif event.kind is EventKind.ENTER:
            self._submit()

    def _toggle(self) -> None:
        if not self.choices:
            return
        index = self._pager.cursor
        if index in self._selected:
            self._selected.remove(index)
        elif len(self._selected) < self.max_selection:
            self._selected.add(index)
        else:
            logger.debug("Rejected selection of %d: already at max %d", index, self.max_selection)
            self._error = f"max selection: {self.max_selection}"

    def _submit(self) -> None:
        if len(self._selected) < self.min_selection:
            logger.debug("Rejected submit: %d selected, min %d", len(self._selected), self.min_selection)
            self._error = f"min selection: {self.min_selection}"
            return
        self._interacting = False
        self._value = [choice.data for index, choice in enumerate(self.choices) if index in self._selected]

    def _selected_names(self) -> str:
        return ", ".join(
            choice.display_name for index, choice in enumerate(self.choices) if index in self._selected
        )

    def render(self) -> str:
        buf = StringIO()
        buf.write(self._view.question_mark_prefix)
        buf.write(" ")
        buf.write(style(self.message, bold=True))
        buf.write(" ")

        if not self._interacting:
            buf.write(style(self._selected_names(), fg=FG.CYAN, bold=True))
            buf.write("\n")
            return buf.getvalue()

        if self.hint.strip():
            buf.write(style(self.hint, fg=FG.BRIGHT_BLACK))
        buf.write("\n")

        for index in self._pager.visible():
            buf.write(self._view.cursor if index == self._pager.cursor else self._view.non_cursor)
            name = self.choices[index].display_name
            if index in self._selected:
                buf.write(self._view.checked)
                buf.write(style(name, fg=FG.CYAN, bold=True))
            else:
                buf.write(self._view.unchecked)
                buf.write(name)
            buf.write("\n")

        if self._pager.paginated:
            buf.write(style(PAGINATION_INFO, fg=FG.BRIGHT_BLACK))
            buf.write("\n")
        if self._error:
            buf.write(style(self._error, fg=FG.RED, bold=True))
            buf.write("\n")
        return buf.getvalue()
