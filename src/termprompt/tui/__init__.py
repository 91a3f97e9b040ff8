"""
Terminal prompt engine.

Provides the key decoder, the re-render surface, the widget base class
and the four prompt widgets (list, checkbox, confirm, input).
"""
from __future__ import annotations

from termprompt.tui.checkbox_widget import CheckboxWidget
from termprompt.tui.component import Choice, Pager, Widget
from termprompt.tui.confirm_widget import ConfirmWidget
from termprompt.tui.input_widget import InputWidget, NumberInputWidget, PasswordInputWidget
from termprompt.tui.keys import BufferByteSource, ByteSource, Event, EventDecoder, EventKind, char_input
from termprompt.tui.list_widget import ListWidget
from termprompt.tui.renderer import RenderSurface

__all__ = [
    # Core
    "Widget",
    "Choice",
    "Pager",
    "RenderSurface",
    # Keys
    "Event",
    "EventKind",
    "EventDecoder",
    "ByteSource",
    "BufferByteSource",
    "char_input",
    # Widgets
    "ListWidget",
    "CheckboxWidget",
    "ConfirmWidget",
    "InputWidget",
    "NumberInputWidget",
    "PasswordInputWidget",
]
