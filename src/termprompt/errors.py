"""Exception types raised by termprompt."""

from __future__ import annotations


class PromptError(Exception):
    """Base class for all termprompt errors."""


class ConfigError(PromptError):
    """Raised when a configuration value cannot be interpreted."""


class InputParseError(PromptError):
    """
    Raised when accepted input cannot be converted to its target type.

    The numeric prompt filters and validates every keystroke, so reaching
    this error means the filter/validate pair is broken.
    """

    def __init__(self, text: str, target: str = "decimal") -> None:
        super().__init__(f"cannot parse {text!r} as {target}")
        self.text = text
        self.target = target


class TerminalUnavailableError(PromptError):
    """Raised when stdin is not an interactive terminal."""
