"""
Free-text input prompt and its numeric and password variants.

Three caller-supplied callables shape the behaviour:

* ``filter(candidate)`` decides whether a keystroke may extend the buffer
  (rejected keystrokes are dropped without feedback);
* ``validate(text)`` decides whether Enter may complete the prompt;
* ``transform(text)`` changes only how the buffer is drawn.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from io import StringIO

from termprompt.errors import InputParseError
from termprompt.logging import get_logger
from termprompt.profile import Profile
from termprompt.tui.ansi import FG, cursor_back, style
from termprompt.tui.component import Widget
from termprompt.tui.keys import Event, EventKind
from termprompt.tui.theme import ViewOptions
from termprompt.tui.theme import view_options as default_view_options

logger = get_logger("tui.input")

INVALID_INPUT = "invalid input"


def accept_all(text: str) -> bool:
    return True


def identity(text: str) -> str:
    return text


class InputWidget(Widget[str]):
    """
    Collect a line of text.

    Parameters
    ----------
    message:
        Question shown after the ``?`` prefix.
    default:
        Returned when the user submits an empty buffer.
    hint:
        Dimmed placeholder shown while the buffer is empty.
    validate:
        Checked against :meth:`value` on Enter.
    filter:
        Checked against the would-be buffer before each character or space.
    transform:
        Applied to the buffer for display only.
    """

    def __init__(
        self,
        message: str,
        *,
        default: str = "",
        hint: str = "",
        validate: Callable[[str], bool] = accept_all,
        filter: Callable[[str], bool] = accept_all,
        transform: Callable[[str], str] = identity,
        view_options: ViewOptions | None = None,
        profile: Profile = Profile.MODERN,
    ) -> None:
        super().__init__()
        self.message = message
        self.default = default
        self.hint = hint
        self._validate = validate
        self._filter = filter
        self._transform = transform
        self._view = view_options or default_view_options(profile)
        self._buffer = ""
        self._error = ""

    @property
    def buffer(self) -> str:
        """Text typed so far."""
        return self._buffer

    @property
    def error_message(self) -> str:
        return self._error

    def value(self) -> str:
        return self._buffer or self.default

    def transform(self, text: str) -> str:
        return self._transform(text)

    def consume(self, event: Event) -> None:
        self._error = ""
        kind = event.kind
        if kind is EventKind.ENTER:
            if self._validate(self.value()):
                self._interacting = False
            else:
                logger.debug("Validation failed for %r", self.value())
                self._error = INVALID_INPUT
        elif kind is EventKind.BACKSPACE:
            self._buffer = self._buffer[:-1]
        elif kind is EventKind.SPACE:
            self._append(" ")
        elif kind is EventKind.CHAR:
            self._append(event.char)

    def _append(self, char: str) -> None:
        candidate = self._buffer + char
        if self._filter(candidate):
            self._buffer = candidate

    def render(self) -> str:
        buf = StringIO()
        buf.write(self._view.question_mark_prefix)
        buf.write(" ")
        buf.write(style(self.message, bold=True))
        buf.write(" ")

        if not self._interacting:
            buf.write(style(self.transform(self.value()), fg=FG.CYAN, bold=True))
            buf.write("\n")
        elif not self._buffer and self.hint.strip():
            # Park the caret where typing will start
            buf.write("  ")
            buf.write(style(self.hint, fg=FG.BRIGHT_BLACK))
            buf.write(cursor_back(len(self.hint) + 2))
        else:
            buf.write(self.transform(self._buffer))
            if self._error:
                buf.write("  ")
                buf.write(style(self._error, fg=FG.RED, bold=True))
                buf.write(cursor_back(len(self._error) + 2))
        return buf.getvalue()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

NUMBER_PATTERN = re.compile(r"\d+\.?\d*")
NUMBER_PREFIX_PATTERN = re.compile(r"\d*\.?\d*")


def is_number(text: str) -> bool:
    """Whether *text* is a complete decimal number such as ``12`` or ``12.5``."""
    return NUMBER_PATTERN.fullmatch(text) is not None


def is_number_prefix(text: str) -> bool:
    """Whether *text* could still grow into a decimal number."""
    return NUMBER_PREFIX_PATTERN.fullmatch(text) is not None


def parse_decimal(text: str) -> Decimal:
    """Parse *text* as a :class:`~decimal.Decimal`, raising ``InputParseError``."""
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise InputParseError(text) from exc


class NumberInputWidget(InputWidget):
    """Input restricted to non-negative decimal numbers."""

    def __init__(
        self,
        message: str,
        *,
        default: str = "",
        hint: str = "",
        transform: Callable[[str], str] = identity,
        view_options: ViewOptions | None = None,
        profile: Profile = Profile.MODERN,
    ) -> None:
        super().__init__(
            message,
            default=default,
            hint=hint,
            validate=is_number,
            filter=is_number_prefix,
            transform=transform,
            view_options=view_options,
            profile=profile,
        )

    def decimal_value(self) -> Decimal:
        """The accepted text as a ``Decimal``."""
        return parse_decimal(self.value())


class PasswordInputWidget(InputWidget):
    """Input that draws every character as *mask*."""

    def __init__(
        self,
        message: str,
        *,
        default: str = "",
        hint: str = "",
        mask: str = "*",
        view_options: ViewOptions | None = None,
        profile: Profile = Profile.MODERN,
    ) -> None:
        super().__init__(
            message,
            default=default,
            hint=hint,
            view_options=view_options,
            profile=profile,
        )
        self.mask = mask

    def transform(self, text: str) -> str:
        return self.mask * len(text)
