"""Yes/no confirmation prompt."""

from __future__ import annotations

from io import StringIO

from termprompt.profile import Profile
from termprompt.tui.ansi import FG, style
from termprompt.tui.component import Widget
from termprompt.tui.keys import Event, EventKind
from termprompt.tui.theme import ViewOptions
from termprompt.tui.theme import view_options as default_view_options


class ConfirmWidget(Widget[bool]):
    """
    Ask a yes/no question.

    Left or ``y`` selects Yes, Right or ``n`` selects No, any other typed
    character selects No.  Enter accepts the current answer.
    """

    def __init__(
        self,
        message: str,
        *,
        default: bool = False,
        view_options: ViewOptions | None = None,
        profile: Profile = Profile.MODERN,
    ) -> None:
        super().__init__()
        self.message = message
        self._confirmed = default
        self._view = view_options or default_view_options(profile)

    def value(self) -> bool:
        return self._confirmed

    def consume(self, event: Event) -> None:
        kind = event.kind
        if kind is EventKind.LEFT:
            self._confirmed = True
        elif kind is EventKind.RIGHT:
            self._confirmed = False
        elif kind is EventKind.ENTER:
            self._interacting = False
        elif kind is EventKind.CHAR:
            self._confirmed = event.char in ("y", "Y")

    def render(self) -> str:
        buf = StringIO()
        buf.write(self._view.question_mark_prefix)
        buf.write(" ")
        buf.write(style(self.message, bold=True))
        buf.write(" ")
        if self._interacting:
            buf.write("[Yes] No " if self._confirmed else " Yes [No]")
        else:
            buf.write(style("Yes" if self._confirmed else "No", fg=FG.CYAN, bold=True))
            buf.write("\n")
        return buf.getvalue()
