"""
Single-choice list prompt.

Up/Down move the cursor through a (possibly paginated) list of choices;
Enter picks the choice under the cursor.
"""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO
from typing import TypeVar

from termprompt.profile import Profile
from termprompt.tui.ansi import FG, style
from termprompt.tui.component import PAGINATION_INFO, Choice, Pager, Widget, check_choices
from termprompt.tui.keys import Event, EventKind
from termprompt.tui.theme import ListViewOptions, list_view_options

T = TypeVar("T")


class ListWidget(Widget[T]):
    """
    Pick exactly one of *choices*.

    Parameters
    ----------
    message:
        Question shown after the ``?`` prefix.
    choices:
        Non-empty sequence of :class:`Choice`.
    hint:
        Dimmed text shown next to the message while interacting.
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
        page_size: int | None = None,
        view_options: ListViewOptions | None = None,
        profile: Profile = Profile.MODERN,
    ) -> None:
        super().__init__()
        self.message = message
        self.hint = hint
        self.choices = check_choices(choices)
        if not self.choices:
            raise ValueError("ListWidget needs at least one choice")
        self._pager = Pager(len(self.choices), page_size)
        self._view = view_options or list_view_options(profile)

    @property
    def cursor(self) -> int:
        return self._pager.cursor

    @property
    def window_start(self) -> int:
        return self._pager.start

    def value(self) -> T:
        return self.choices[self._pager.cursor].data

    def consume(self, event: Event) -> None:
        if self._pager.move(event):
            return
        if event.kind is EventKind.ENTER:
            self._interacting = False

    def render(self) -> str:
        buf = StringIO()
        buf.write(self._view.question_mark_prefix)
        buf.write(" ")
        buf.write(style(self.message, bold=True))
        buf.write(" ")

        if not self._interacting:
            chosen = self.choices[self._pager.cursor].display_name
            buf.write(style(chosen, fg=FG.CYAN, bold=True))
            buf.write("\n")
            return buf.getvalue()

        if self.hint.strip():
            buf.write(style(self.hint, fg=FG.BRIGHT_BLACK))
        buf.write("\n")

        for index in self._pager.visible():
            name = self.choices[index].display_name
            if index == self._pager.cursor:
                buf.write(self._view.cursor)
                buf.write(style(name, fg=FG.CYAN, bold=True))
            else:
                buf.write(self._view.non_cursor)
                buf.write(name)
            buf.write("\n")

        if self._pager.paginated:
            buf.write(style(PAGINATION_INFO, fg=FG.BRIGHT_BLACK))
            buf.write("\n")
        return buf.getvalue()
