"""
Convenience prompts.

Each helper builds a widget from a :class:`~termprompt.config.PromptConfig`
(``PromptConfig.from_env()`` when none is given) and runs it on the
attached terminal.

Example:
    from termprompt import prompt_checkbox, prompt_confirm

    toppings = prompt_checkbox("Toppings?", ["cheese", "olives", "ham"], max_selection=2)
    if prompt_confirm("Order now?", default=True):
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import TypeVar

from termprompt.config import PromptConfig
from termprompt.driver import prompt
from termprompt.logging import set_level
from termprompt.tui.checkbox_widget import CheckboxWidget
from termprompt.tui.component import Choice
from termprompt.tui.confirm_widget import ConfirmWidget
from termprompt.tui.input_widget import (
    InputWidget,
    NumberInputWidget,
    PasswordInputWidget,
    accept_all,
    identity,
    parse_decimal,
)
from termprompt.tui.list_widget import ListWidget
from termprompt.tui.theme import (
    CheckboxViewOptions,
    ListViewOptions,
    ViewOptions,
    checkbox_view_options,
    list_view_options,
    view_options,
)

T = TypeVar("T")


def _config(config: PromptConfig | None) -> PromptConfig:
    config = config or PromptConfig.from_env()
    if config.log_level:
        set_level(config.log_level)
    return config


def _as_choices(names: Sequence[str]) -> list[Choice[str]]:
    return [Choice(name, name) for name in names]


def prompt_list(
    message: str,
    choices: Sequence[str],
    *,
    hint: str = "",
    page_size: int | None = None,
    view: ListViewOptions | None = None,
    config: PromptConfig | None = None,
) -> str:
    """Pick one of *choices*; returns the picked string."""
    return prompt_list_object(
        message,
        _as_choices(choices),
        hint=hint,
        page_size=page_size,
        view=view,
        config=config,
    )


def prompt_list_object(
    message: str,
    choices: Sequence[Choice[T]],
    *,
    hint: str = "",
    page_size: int | None = None,
    view: ListViewOptions | None = None,
    config: PromptConfig | None = None,
) -> T:
    """Pick one of *choices*; returns the picked choice's data."""
    config = _config(config)
    profile = config.resolve_profile()
    widget = ListWidget(
        message,
        choices,
        hint=hint,
        page_size=page_size if page_size is not None else config.list_page_size,
        view_options=view or list_view_options(profile, **config.glyphs),
        profile=profile,
    )
    return prompt(widget, config)


def prompt_checkbox(
    message: str,
    choices: Sequence[str],
    *,
    hint: str = "",
    min_selection: int = 0,
    max_selection: int | None = None,
    page_size: int | None = None,
    view: CheckboxViewOptions | None = None,
    config: PromptConfig | None = None,
) -> list[str]:
    """Pick several of *choices*; returns the picked strings in list order."""
    return prompt_checkbox_object(
        message,
        _as_choices(choices),
        hint=hint,
        min_selection=min_selection,
        max_selection=max_selection,
        page_size=page_size,
        view=view,
        config=config,
    )


def prompt_checkbox_object(
    message: str,
    choices: Sequence[Choice[T]],
    *,
    hint: str = "",
    min_selection: int = 0,
    max_selection: int | None = None,
    page_size: int | None = None,
    view: CheckboxViewOptions | None = None,
    config: PromptConfig | None = None,
) -> list[T]:
    """Pick several of *choices*; returns their data in list order."""
    config = _config(config)
    profile = config.resolve_profile()
    widget = CheckboxWidget(
        message,
        choices,
        hint=hint,
        min_selection=min_selection,
        max_selection=max_selection,
        page_size=page_size if page_size is not None else config.checkbox_page_size,
        view_options=view or checkbox_view_options(profile, **config.glyphs),
        profile=profile,
    )
    return prompt(widget, config)


def prompt_confirm(
    message: str,
    *,
    default: bool = False,
    view: ViewOptions | None = None,
    config: PromptConfig | None = None,
) -> bool:
    """Ask a yes/no question."""
    config = _config(config)
    profile = config.resolve_profile()
    widget = ConfirmWidget(
        message,
        default=default,
        view_options=view or view_options(profile, **config.glyphs),
        profile=profile,
    )
    return prompt(widget, config)


def prompt_input(
    message: str,
    *,
    default: str = "",
    hint: str = "",
    validate: Callable[[str], bool] = accept_all,
    filter: Callable[[str], bool] = accept_all,
    transform: Callable[[str], str] = identity,
    view: ViewOptions | None = None,
    config: PromptConfig | None = None,
) -> str:
    """Read a line of text."""
    config = _config(config)
    profile = config.resolve_profile()
    widget = InputWidget(
        message,
        default=default,
        hint=hint,
        validate=validate,
        filter=filter,
        transform=transform,
        view_options=view or view_options(profile, **config.glyphs),
        profile=profile,
    )
    return prompt(widget, config)


def prompt_input_password(
    message: str,
    *,
    default: str = "",
    hint: str = "",
    mask: str | None = None,
    view: ViewOptions | None = None,
    config: PromptConfig | None = None,
) -> str:
    """Read a line of text, echoing a mask character per keystroke."""
    config = _config(config)
    profile = config.resolve_profile()
    widget = PasswordInputWidget(
        message,
        default=default,
        hint=hint,
        mask=mask if mask is not None else config.password_mask,
        view_options=view or view_options(profile, **config.glyphs),
        profile=profile,
    )
    return prompt(widget, config)


def prompt_input_number(
    message: str,
    *,
    default: str = "",
    hint: str = "",
    transform: Callable[[str], str] = identity,
    view: ViewOptions | None = None,
    config: PromptConfig | None = None,
) -> Decimal:
    """Read a non-negative decimal number."""
    config = _config(config)
    profile = config.resolve_profile()
    widget = NumberInputWidget(
        message,
        default=default,
        hint=hint,
        transform=transform,
        view_options=view or view_options(profile, **config.glyphs),
        profile=profile,
    )
    return parse_decimal(prompt(widget, config))
