"""
termprompt - interactive terminal prompts.

Renders a single widget (list, checkbox, confirm or text input) in the
terminal, decodes raw keystrokes into events and redraws the widget in
place until it yields a typed result.

Example:
    from termprompt import Choice, prompt_list_object

    size = prompt_list_object(
        "Pick a size",
        [Choice("Small", 1), Choice("Medium", 2), Choice("Large", 3)],
    )
"""

from termprompt.config import PromptConfig
from termprompt.driver import InteractionDriver, prompt
from termprompt.errors import (
    ConfigError,
    InputParseError,
    PromptError,
    TerminalUnavailableError,
)
from termprompt.logging import get_logger, setup_logging
from termprompt.profile import Profile, detect_profile
from termprompt.prompts import (
    prompt_checkbox,
    prompt_checkbox_object,
    prompt_confirm,
    prompt_input,
    prompt_input_number,
    prompt_input_password,
    prompt_list,
    prompt_list_object,
)
from termprompt.tui import (
    CheckboxWidget,
    Choice,
    ConfirmWidget,
    Event,
    EventDecoder,
    EventKind,
    InputWidget,
    ListWidget,
    NumberInputWidget,
    PasswordInputWidget,
    RenderSurface,
    Widget,
)

__version__ = "0.1.0"

__all__ = [
    # Driver
    "InteractionDriver",
    "prompt",
    # Convenience prompts
    "prompt_checkbox",
    "prompt_checkbox_object",
    "prompt_confirm",
    "prompt_input",
    "prompt_input_number",
    "prompt_input_password",
    "prompt_list",
    "prompt_list_object",
    # Widgets
    "Widget",
    "Choice",
    "ListWidget",
    "CheckboxWidget",
    "ConfirmWidget",
    "InputWidget",
    "NumberInputWidget",
    "PasswordInputWidget",
    # Engine
    "Event",
    "EventKind",
    "EventDecoder",
    "RenderSurface",
    # Config
    "PromptConfig",
    "Profile",
    "detect_profile",
    # Errors
    "PromptError",
    "ConfigError",
    "InputParseError",
    "TerminalUnavailableError",
    # Logging
    "get_logger",
    "setup_logging",
]
