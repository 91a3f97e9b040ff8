"""
Abstract base widget for prompts.

Every interactive prompt (list, checkbox, confirm, input) implements
``Widget``.  The interaction driver only talks to this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from termprompt.tui.keys import Event, EventKind

T = TypeVar("T")
V = TypeVar("V")

PAGINATION_INFO = "(move up and down to reveal more choices)"


@dataclass(frozen=True)
class Choice(Generic[T]):
    """
    One selectable entry.

    Attributes
    ----------
    display_name:
        Text shown for the entry.  Names need not be unique.
    data:
        Value returned when the entry is picked.
    """

    display_name: str
    data: T


class Widget(ABC, Generic[V]):
    """
    Base class for prompt widgets.

    A widget starts out interacting, consumes one event at a time and
    stops interacting once a terminating event has been accepted.
    """

    def __init__(self) -> None:
        self._interacting: bool = True

    # ------------------------------------------------------------------
    # Abstract API
    # ------------------------------------------------------------------

    @abstractmethod
    def render(self) -> str:
        """
        Render the widget's current state as styled text.

        Must not mutate state: two calls without an intervening
        :meth:`consume` return identical strings.
        """
        ...

    @abstractmethod
    def consume(self, event: Event) -> None:
        """Apply one decoded key event to the widget state."""
        ...

    @abstractmethod
    def value(self) -> V:
        """
        The widget's result.

        Only final once :meth:`is_interacting` is ``False``; before that
        it returns the current or configured default value.
        """
        ...

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def is_interacting(self) -> bool:
        """Whether the widget still wants input."""
        return self._interacting


class Pager:
    """
    Cursor plus pagination window over *count* choices.

    Keeps ``0 <= start <= cursor <= start + page_size - 1`` after every
    move; the window shifts by one row at a time.
    """

    def __init__(self, count: int, page_size: int | None = None) -> None:
        if page_size is not None and page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self.count = count
        self.page_size = page_size if page_size is not None else max(count, 1)
        self.cursor = 0
        self.start = 0

    @property
    def paginated(self) -> bool:
        """True when some choices are hidden outside the window."""
        return self.page_size < self.count

    def up(self) -> None:
        if self.count == 0:
            return
        self.cursor = max(0, self.cursor - 1)
        if self.cursor < self.start:
            self.start = max(0, self.start - 1)

    def down(self) -> None:
        if self.count == 0:
            return
        self.cursor = min(self.count - 1, self.cursor + 1)
        if self.cursor > self.start + self.page_size - 1:
            self.start = min(self.count - 1, self.start + 1)

    def move(self, event: Event) -> bool:
        """Apply an Up/Down event; return whether *event* was a move."""
        if event.kind is EventKind.UP:
            self.up()
            return True
        if event.kind is EventKind.DOWN:
            self.down()
            return True
        return False

    def visible(self) -> range:
        """Indices of the choices inside the window."""
        return range(self.start, min(self.count, self.start + self.page_size))


def check_choices(choices: Sequence[Choice[T]]) -> list[Choice[T]]:
    """Copy *choices* into a list, rejecting anything that is not a ``Choice``."""
    result = list(choices)
    for index, choice in enumerate(result):
        if not isinstance(choice, Choice):
            raise TypeError(f"choice {index} is {type(choice).__name__}, expected Choice")
    return result
