"""
Key decoding for terminal input.

Reads raw bytes from a blocking byte source and translates them into
``Event`` objects the widgets dispatch on.  Exactly one event is produced
per :meth:`EventDecoder.decode` call. An escape sequence or a multi-byte
UTF-8 character is always resolved within that call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from termprompt.logging import get_logger
from termprompt.profile import Profile

logger = get_logger("tui.keys")


# ---------------------------------------------------------------------------
# Event data model
# ---------------------------------------------------------------------------

class EventKind(Enum):
    """Logical keyboard events understood by the widgets."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    BACKSPACE = "backspace"
    CLEAR_SCREEN = "clear_screen"
    UNRECOGNIZED = "unrecognized"
    CHAR = "char"


@dataclass(frozen=True)
class Event:
    """
    A single decoded key press.

    Attributes
    ----------
    kind:
        Which logical event this is.
    char:
        The typed character for ``EventKind.CHAR``; empty for every other kind.
    """

    kind: EventKind
    char: str = ""

    def __repr__(self) -> str:
        if self.kind is EventKind.CHAR:
            return f"Event(CHAR, {self.char!r})"
        return f"Event({self.kind.name})"


EVENT_UP = Event(EventKind.UP)
EVENT_DOWN = Event(EventKind.DOWN)
EVENT_LEFT = Event(EventKind.LEFT)
EVENT_RIGHT = Event(EventKind.RIGHT)
EVENT_ENTER = Event(EventKind.ENTER)
EVENT_SPACE = Event(EventKind.SPACE)
EVENT_BACKSPACE = Event(EventKind.BACKSPACE)
EVENT_CLEAR_SCREEN = Event(EventKind.CLEAR_SCREEN)
EVENT_UNRECOGNIZED = Event(EventKind.UNRECOGNIZED)


def char_input(c: str) -> Event:
    """Build the character-input event for the single character *c*."""
    if len(c) != 1:
        raise ValueError(f"char_input expects a single character, got {c!r}")
    return Event(EventKind.CHAR, c)


# ---------------------------------------------------------------------------
# Byte sources
# ---------------------------------------------------------------------------

class ByteSource(Protocol):
    """Blocking source of input bytes."""

    def read_byte(self) -> int:
        """Block until one byte is available and return it; raise ``EOFError`` at end."""
        ...


class BufferByteSource:
    """Replays a fixed byte string, one byte per read."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._pos

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            raise EOFError("byte source exhausted")
        byte = self._data[self._pos]
        self._pos += 1
        return byte


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_ESC = 27

# Final byte of an arrow-key sequence, shared by both dialects
_ARROWS: dict[int, Event] = {
    65: EVENT_UP,  # A
    66: EVENT_DOWN,  # B
    67: EVENT_RIGHT,  # C
    68: EVENT_LEFT,  # D
}

_COMMON: dict[int, Event] = {
    13: EVENT_ENTER,
    32: EVENT_SPACE,
    12: EVENT_CLEAR_SCREEN,
    127: EVENT_BACKSPACE,
}

# Legacy consoles send BS (8) for backspace, SS3 (ESC O) for arrows.
_LEGACY_SINGLE: dict[int, Event] = {**_COMMON, 8: EVENT_BACKSPACE}
_MODERN_SINGLE: dict[int, Event] = dict(_COMMON)

_INTRODUCERS: dict[Profile, int] = {
    Profile.LEGACY: 79,  # O
    Profile.MODERN: 91,  # [
}


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

class EventDecoder:
    """
    Decode key presses for one terminal *profile*.

    The profile fixes the escape-sequence introducer and the accepted
    backspace bytes.  The decoder holds no state between calls.
    """

    def __init__(self, profile: Profile = Profile.MODERN) -> None:
        self._profile = profile
        self._single = _LEGACY_SINGLE if profile is Profile.LEGACY else _MODERN_SINGLE
        self._introducer = _INTRODUCERS[profile]

    @property
    def profile(self) -> Profile:
        return self._profile

    def decode(self, source: ByteSource) -> Event:
        """Read one or more bytes from *source* and return exactly one event."""
        byte = source.read_byte()
        if byte == _ESC:
            return self._decode_escape(source)
        event = self._single.get(byte)
        if event is not None:
            return event
        if byte < 0x80:
            return Event(EventKind.CHAR, chr(byte))
        return self._decode_utf8(byte, source)

    def _decode_escape(self, source: ByteSource) -> Event:
        second = source.read_byte()
        if second != self._introducer:
            logger.debug("Unrecognized escape sequence: 27 %d", second)
            return EVENT_UNRECOGNIZED
        final = source.read_byte()
        event = _ARROWS.get(final)
        if event is None:
            logger.debug("Unrecognized escape sequence: 27 %d %d", second, final)
            return EVENT_UNRECOGNIZED
        return event

    def _decode_utf8(self, lead: int, source: ByteSource) -> Event:
        length = _utf8_length(lead)
        if length is None:
            logger.debug("Byte %d does not start a UTF-8 character", lead)
            return EVENT_UNRECOGNIZED
        data = bytearray([lead])
        for _ in range(length - 1):
            byte = source.read_byte()
            data.append(byte)
            if byte & 0xC0 != 0x80:
                logger.debug("Broken UTF-8 sequence: %s", " ".join(map(str, data)))
                return EVENT_UNRECOGNIZED
        try:
            return Event(EventKind.CHAR, data.decode("utf-8"))
        except UnicodeDecodeError:
            logger.debug("Invalid UTF-8 sequence: %s", " ".join(map(str, data)))
            return EVENT_UNRECOGNIZED


def _utf8_length(lead: int) -> int | None:
    """Byte length announced by a UTF-8 lead byte, or ``None`` for a non-lead byte."""
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return None
