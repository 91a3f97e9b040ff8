"""
Configuration for termprompt.

Holds the process-wide defaults the convenience prompts fall back to.
Can be loaded from YAML files, the environment, or constructed
programmatically.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from termprompt.errors import ConfigError
from termprompt.profile import Profile, detect_profile
from termprompt.tui.theme import resolve_glyphs

ENV_PROFILE = "TERMPROMPT_PROFILE"
ENV_PAGE_SIZE = "TERMPROMPT_PAGE_SIZE"
ENV_LOG_LEVEL = "TERMPROMPT_LOG_LEVEL"


@dataclass
class PromptConfig:
    """
    Defaults applied by the ``prompt_*`` helpers.

    Example YAML:
        profile: legacy
        list_page_size: 15
        checkbox_page_size: 10
        password_mask: "#"
        glyphs:
          unchecked: "[ ] "
          cursor:
            text: " -> "
            fg: bright_cyan
    """

    profile: Profile | None = None  # None = detect from platform
    list_page_size: int | None = None  # None = show every choice
    checkbox_page_size: int | None = 10
    password_mask: str = "*"
    glyphs: dict[str, str] = field(default_factory=dict)  # Styled glyph overrides
    log_level: str | None = None

    def resolve_profile(self) -> Profile:
        """Return the configured profile, detecting it when unset."""
        return self.profile if self.profile is not None else detect_profile()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PromptConfig:
        """Create config from a dictionary."""
        profile = data.get("profile")
        try:
            return cls(
                profile=Profile.parse(profile) if profile else None,
                list_page_size=_page_size(data.get("list_page_size")),
                checkbox_page_size=_page_size(data.get("checkbox_page_size", 10)),
                password_mask=str(data.get("password_mask", "*")),
                glyphs=resolve_glyphs(data.get("glyphs") or {}),
                log_level=data.get("log_level"),
            )
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    @classmethod
    def from_yaml(cls, path: Path) -> PromptConfig:
        """Load config from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> PromptConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PromptConfig:
        """Create config from ``TERMPROMPT_*`` environment variables."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        if env.get(ENV_PROFILE):
            data["profile"] = env[ENV_PROFILE]
        if env.get(ENV_PAGE_SIZE):
            try:
                size = int(env[ENV_PAGE_SIZE])
            except ValueError:
                raise ConfigError(f"{ENV_PAGE_SIZE} must be an integer, got {env[ENV_PAGE_SIZE]!r}") from None
            data["list_page_size"] = size
            data["checkbox_page_size"] = size
        if env.get(ENV_LOG_LEVEL):
            data["log_level"] = env[ENV_LOG_LEVEL]
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "profile": self.profile.value if self.profile else None,
            "list_page_size": self.list_page_size,
            "checkbox_page_size": self.checkbox_page_size,
            "password_mask": self.password_mask,
            "glyphs": dict(self.glyphs),
            "log_level": self.log_level,
        }


def _page_size(value: Any) -> int | None:
    if value is None:
        return None
    size = int(value)
    if size < 1:
        raise ValueError(f"page size must be at least 1, got {size}")
    return size
