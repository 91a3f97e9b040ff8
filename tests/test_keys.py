"""Tests for key decoding."""

from __future__ import annotations

import pytest

from termprompt.profile import Profile
from termprompt.tui.keys import (
    EVENT_BACKSPACE,
    EVENT_CLEAR_SCREEN,
    EVENT_DOWN,
    EVENT_ENTER,
    EVENT_LEFT,
    EVENT_RIGHT,
    EVENT_SPACE,
    EVENT_UNRECOGNIZED,
    EVENT_UP,
    BufferByteSource,
    Event,
    EventDecoder,
    EventKind,
    char_input,
)

_SPECIAL_BYTES = {8, 12, 13, 27, 32, 127}


def decode_all(data: bytes, profile: Profile = Profile.MODERN) -> list[Event]:
    decoder = EventDecoder(profile)
    source = BufferByteSource(data)
    events: list[Event] = []
    while source.remaining:
        events.append(decoder.decode(source))
    return events


# ---------------------------------------------------------------------------
# Event model
# ---------------------------------------------------------------------------


class TestEvent:
    def test_char_input_carries_character(self) -> None:
        event = char_input("x")
        assert event.kind is EventKind.CHAR
        assert event.char == "x"

    def test_events_compare_by_value(self) -> None:
        assert char_input("x") == Event(EventKind.CHAR, "x")
        assert Event(EventKind.UP) == EVENT_UP

    def test_char_input_rejects_multiple_characters(self) -> None:
        with pytest.raises(ValueError):
            char_input("ab")

    def test_repr(self) -> None:
        assert repr(EVENT_ENTER) == "Event(ENTER)"
        assert repr(char_input("q")) == "Event(CHAR, 'q')"


# ---------------------------------------------------------------------------
# Byte sources
# ---------------------------------------------------------------------------


class TestBufferByteSource:
    def test_reads_bytes_in_order(self) -> None:
        source = BufferByteSource(b"ab")
        assert source.read_byte() == 97
        assert source.read_byte() == 98
        assert source.remaining == 0

    def test_exhausted_source_raises_eof(self) -> None:
        source = BufferByteSource(b"")
        with pytest.raises(EOFError):
            source.read_byte()


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class TestModernProfile:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\x1b[A", EVENT_UP),
            (b"\x1b[B", EVENT_DOWN),
            (b"\x1b[C", EVENT_RIGHT),
            (b"\x1b[D", EVENT_LEFT),
        ],
    )
    def test_arrow_keys(self, data: bytes, expected: Event) -> None:
        assert decode_all(data) == [expected]

    def test_single_byte_keys(self) -> None:
        assert decode_all(b"\r \x0c\x7f") == [
            EVENT_ENTER,
            EVENT_SPACE,
            EVENT_CLEAR_SCREEN,
            EVENT_BACKSPACE,
        ]

    def test_bs_byte_is_plain_character(self) -> None:
        assert decode_all(b"\x08") == [char_input("\b")]

    def test_legacy_introducer_is_unrecognized(self) -> None:
        # ESC O is consumed as one unrecognized event, the final byte is typed text
        assert decode_all(b"\x1bOA") == [EVENT_UNRECOGNIZED, char_input("A")]

    def test_unknown_final_byte_consumes_whole_sequence(self) -> None:
        assert decode_all(b"\x1b[Zx") == [EVENT_UNRECOGNIZED, char_input("x")]

    def test_truncated_escape_blocks_for_more_input(self) -> None:
        decoder = EventDecoder(Profile.MODERN)
        with pytest.raises(EOFError):
            decoder.decode(BufferByteSource(b"\x1b["))

    def test_printable_characters(self) -> None:
        assert decode_all(b"hi") == [char_input("h"), char_input("i")]


class TestLegacyProfile:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\x1bOA", EVENT_UP),
            (b"\x1bOB", EVENT_DOWN),
            (b"\x1bOC", EVENT_RIGHT),
            (b"\x1bOD", EVENT_LEFT),
        ],
    )
    def test_arrow_keys(self, data: bytes, expected: Event) -> None:
        assert decode_all(data, Profile.LEGACY) == [expected]

    def test_both_backspace_bytes(self) -> None:
        assert decode_all(b"\x08\x7f", Profile.LEGACY) == [EVENT_BACKSPACE, EVENT_BACKSPACE]

    def test_modern_introducer_is_unrecognized(self) -> None:
        assert decode_all(b"\x1b[A", Profile.LEGACY) == [EVENT_UNRECOGNIZED, char_input("A")]

    def test_profile_property(self) -> None:
        assert EventDecoder(Profile.LEGACY).profile is Profile.LEGACY


class TestUtf8Characters:
    @pytest.mark.parametrize("text", ["é", "ß", "中", "€", "😀"])
    @pytest.mark.parametrize("profile", list(Profile))
    def test_multi_byte_character_is_one_event(self, text: str, profile: Profile) -> None:
        assert decode_all(text.encode("utf-8"), profile) == [char_input(text)]

    def test_mixed_text(self) -> None:
        assert decode_all("café!".encode("utf-8")) == [char_input(c) for c in "café!"]

    def test_whole_character_read_in_one_call(self) -> None:
        decoder = EventDecoder(Profile.MODERN)
        source = BufferByteSource("中x".encode("utf-8"))
        assert decoder.decode(source) == char_input("中")
        assert source.remaining == 1

    @pytest.mark.parametrize(
        "data",
        [
            b"\x80",  # continuation byte without a lead
            b"\xbf",
            b"\xf8",  # not a lead byte
            b"\xff",
            b"\xc0\x80",  # overlong encoding
            b"\xed\xa0\x80",  # surrogate
            b"\xf5\x80\x80\x80",  # beyond U+10FFFF
        ],
    )
    def test_invalid_sequence_is_unrecognized(self, data: bytes) -> None:
        assert decode_all(data) == [EVENT_UNRECOGNIZED]

    def test_interrupted_sequence_is_unrecognized(self) -> None:
        assert decode_all(b"\xc3Ax") == [EVENT_UNRECOGNIZED, char_input("x")]

    def test_truncated_sequence_blocks_for_more_input(self) -> None:
        decoder = EventDecoder(Profile.MODERN)
        with pytest.raises(EOFError):
            decoder.decode(BufferByteSource("é".encode("utf-8")[:1]))


class TestDecoderIsStateless:
    @pytest.mark.parametrize("profile", list(Profile))
    def test_every_plain_ascii_byte_is_character_input(self, profile: Profile) -> None:
        decoder = EventDecoder(profile)
        for byte in range(128):
            if byte in _SPECIAL_BYTES:
                continue
            assert decoder.decode(BufferByteSource(bytes([byte]))) == char_input(chr(byte))

    @pytest.mark.parametrize("profile", list(Profile))
    def test_space_after_any_prior_input(self, profile: Profile) -> None:
        decoder = EventDecoder(profile)
        source = BufferByteSource(b"\x1b[A\x1bOZ\x1bx abc \r ")
        events = []
        while source.remaining:
            events.append(decoder.decode(source))
        assert events[-1] == EVENT_SPACE
        assert decoder.decode(BufferByteSource(b" ")) == EVENT_SPACE

    def test_one_event_per_call(self) -> None:
        decoder = EventDecoder(Profile.MODERN)
        source = BufferByteSource(b"\x1b[Bq")
        assert decoder.decode(source) == EVENT_DOWN
        assert source.remaining == 1
        assert decoder.decode(source) == char_input("q")
