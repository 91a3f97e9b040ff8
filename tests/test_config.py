"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from termprompt.config import PromptConfig
from termprompt.errors import ConfigError
from termprompt.profile import Profile
from termprompt.tui.ansi import FG, style


class TestPromptConfig:
    def test_default_values(self) -> None:
        config = PromptConfig()

        assert config.profile is None
        assert config.list_page_size is None
        assert config.checkbox_page_size == 10
        assert config.password_mask == "*"
        assert config.glyphs == {}
        assert config.log_level is None

    def test_from_dict(self) -> None:
        config = PromptConfig.from_dict(
            {
                "profile": "Legacy",
                "list_page_size": 5,
                "checkbox_page_size": 7,
                "password_mask": "#",
                "log_level": "DEBUG",
            }
        )

        assert config.profile is Profile.LEGACY
        assert config.list_page_size == 5
        assert config.checkbox_page_size == 7
        assert config.password_mask == "#"
        assert config.log_level == "DEBUG"

    def test_from_dict_styles_glyphs(self) -> None:
        config = PromptConfig.from_dict(
            {"glyphs": {"unchecked": "[ ] ", "checked": {"text": "[x] ", "fg": "green"}}}
        )
        assert config.glyphs == {"unchecked": "[ ] ", "checked": style("[x] ", fg=FG.GREEN)}

    @pytest.mark.parametrize(
        "data",
        [
            {"profile": "vt52"},
            {"list_page_size": 0},
            {"checkbox_page_size": "many"},
            {"glyphs": {"spinner": "*"}},
            {"glyphs": {"cursor": {"text": ">", "fg": "mauve"}}},
        ],
    )
    def test_invalid_values_raise_config_error(self, data: dict) -> None:
        with pytest.raises(ConfigError):
            PromptConfig.from_dict(data)

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "termprompt.yaml"
        path.write_text(
            dedent(
                """\
                profile: modern
                list_page_size: 8
                glyphs:
                  cursor:
                    text: " -> "
                    fg: bright_cyan
                """
            )
        )

        config = PromptConfig.from_yaml(path)

        assert config.profile is Profile.MODERN
        assert config.list_page_size == 8
        assert config.glyphs["cursor"] == style(" -> ", fg=FG.BRIGHT_CYAN)

    def test_from_empty_yaml_string(self) -> None:
        assert PromptConfig.from_yaml_string("") == PromptConfig()

    def test_from_env(self) -> None:
        config = PromptConfig.from_env(
            {
                "TERMPROMPT_PROFILE": "legacy",
                "TERMPROMPT_PAGE_SIZE": "4",
                "TERMPROMPT_LOG_LEVEL": "WARNING",
            }
        )

        assert config.profile is Profile.LEGACY
        assert config.list_page_size == 4
        assert config.checkbox_page_size == 4
        assert config.log_level == "WARNING"

    def test_from_empty_env(self) -> None:
        assert PromptConfig.from_env({}) == PromptConfig()

    def test_bad_page_size_env(self) -> None:
        with pytest.raises(ConfigError):
            PromptConfig.from_env({"TERMPROMPT_PAGE_SIZE": "lots"})

    def test_resolve_profile_prefers_configured(self) -> None:
        assert PromptConfig(profile=Profile.LEGACY).resolve_profile() is Profile.LEGACY

    def test_resolve_profile_detects(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("termprompt.config.detect_profile", lambda: Profile.LEGACY)
        assert PromptConfig().resolve_profile() is Profile.LEGACY

    def test_to_dict_round_trip(self) -> None:
        config = PromptConfig(profile=Profile.LEGACY, list_page_size=3, glyphs={"cursor": "> "})
        assert PromptConfig.from_dict(config.to_dict()) == config
