"""
Interaction driver.

Runs one widget to completion: draw, block on one decoded event, feed it
to the widget, redraw, until the widget stops interacting.
"""

from __future__ import annotations

from typing import TypeVar

from termprompt.config import PromptConfig
from termprompt.logging import get_logger
from termprompt.tui.component import Widget
from termprompt.tui.keys import ByteSource, EventDecoder, EventKind
from termprompt.tui.renderer import RenderSurface
from termprompt.tui.terminal import raw_terminal

logger = get_logger("driver")

V = TypeVar("V")


class InteractionDriver:
    """
    Synchronous event loop for a single prompt session.

    Parameters
    ----------
    source:
        Blocking byte source the keystrokes are read from.
    surface:
        Where frames are drawn.
    decoder:
        Turns bytes into events for the terminal's profile.
    """

    def __init__(
        self,
        source: ByteSource,
        surface: RenderSurface,
        decoder: EventDecoder,
    ) -> None:
        self.source = source
        self.surface = surface
        self.decoder = decoder

    def run(self, widget: Widget[V]) -> V:
        """Drive *widget* until it completes and return its value."""
        logger.debug("Starting %s session", type(widget).__name__)
        self.surface.reset()
        self.surface.display(widget.render())
        while widget.is_interacting():
            event = self.decoder.decode(self.source)
            logger.debug("Event: %r", event)
            if event.kind is EventKind.CLEAR_SCREEN:
                self.surface.clear()
            widget.consume(event)
            self.surface.display(widget.render())
        self.surface.finish()
        result = widget.value()
        logger.debug("Finished %s session", type(widget).__name__)
        return result


def prompt(widget: Widget[V], config: PromptConfig | None = None) -> V:
    """
    Run *widget* on the attached terminal and return its value.

    The terminal is put into cbreak mode for the duration of the prompt and
    restored afterwards, also when the prompt is interrupted.
    """
    config = config or PromptConfig()
    decoder = EventDecoder(config.resolve_profile())
    with raw_terminal() as source:
        return InteractionDriver(source, RenderSurface(), decoder).run(widget)
