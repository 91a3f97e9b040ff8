"""
Differential re-render surface.

``RenderSurface`` remembers how many lines the previous frame occupied and
erases exactly that region before writing the next frame, so repeated
redraws of a prompt never push stale copies into the scrollback.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from termprompt.tui.ansi import clear_screen, cursor_to_column, cursor_up_line, erase_line


class RenderSurface:
    """
    Line-count tracking renderer for a single prompt session.

    Parameters
    ----------
    output:
        Writable text stream, defaults to ``sys.stdout``.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output: TextIO = output or sys.stdout
        self._previous_line_count: int = 0
        self._ends_with_newline: bool = True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def previous_line_count(self) -> int:
        """Number of newline-delimited segments in the last frame."""
        return self._previous_line_count

    def display(self, text: str) -> None:
        """
        Replace the previously displayed frame with *text*.

        Frames taller than two lines are erased line by line upwards;
        shorter frames only clear the current line.
        """
        buf = StringIO()
        buf.write(self.erase_sequence(self._previous_line_count))
        buf.write(text)
        self._write(buf.getvalue())

        self._previous_line_count = len(text.split("\n"))
        self._ends_with_newline = text.endswith("\n")

    def reset(self) -> None:
        """Forget the previous frame; the next display erases nothing above."""
        self._previous_line_count = 0
        self._ends_with_newline = True

    def clear(self) -> None:
        """Clear the screen and reset internal state."""
        self._write(clear_screen())
        self.reset()

    def finish(self) -> None:
        """Leave the cursor on a fresh line below the last frame."""
        if not self._ends_with_newline:
            self._write("\n")
        self.reset()

    # ------------------------------------------------------------------
    # Erase sequence
    # ------------------------------------------------------------------

    @staticmethod
    def erase_sequence(previous_line_count: int) -> str:
        """
        Return the escapes that wipe a frame of *previous_line_count* lines.

        The cursor is always moved to column 0 and the current line erased.
        When the frame spanned more than two lines, ``previous_line_count - 1``
        lines above are erased as well, leaving the cursor at the frame's
        first line.
        """
        parts = [cursor_to_column(0), erase_line()]
        if previous_line_count > 2:
            for _ in range(previous_line_count - 1):
                parts.append(erase_line())
                parts.append(cursor_up_line())
            parts.append(erase_line())
        return "".join(parts)

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _write(self, data: str) -> None:
        """Write data to the output stream and flush."""
        self._output.write(data)
        self._output.flush()
