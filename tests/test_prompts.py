"""Tests for the convenience prompt helpers."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from termprompt.config import PromptConfig
from termprompt.profile import Profile
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
from termprompt.tui.component import Choice

MODERN = PromptConfig(profile=Profile.MODERN)


class TestListPrompts:
    def test_prompt_list_returns_string(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\x1b[B\r")
        assert prompt_list("Pick", ["red", "green", "blue"], config=MODERN) == "green"

    def test_prompt_list_object_returns_data(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\x1b[B\x1b[B\r")
        choices = [Choice("one", 1), Choice("two", 2), Choice("three", 3)]
        assert prompt_list_object("Pick", choices, config=MODERN) == 3

    def test_list_page_size_from_config(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\r")
        config = PromptConfig(profile=Profile.MODERN, list_page_size=2)
        prompt_list("Pick", ["a", "b", "c"], config=config)
        assert "reveal more choices" in capsys.readouterr().out

    def test_legacy_profile(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\x1bOB\r")
        config = PromptConfig(profile=Profile.LEGACY)
        assert prompt_list("Pick", ["a", "b"], config=config) == "b"
        assert " > " in capsys.readouterr().out


class TestCheckboxPrompts:
    def test_prompt_checkbox(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b" \x1b[B\x1b[B \r")
        assert prompt_checkbox("Pick", ["a", "b", "c"], config=MODERN) == ["a", "c"]

    def test_prompt_checkbox_object(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\x1b[B \r")
        choices = [Choice("one", 1), Choice("two", 2)]
        assert prompt_checkbox_object("Pick", choices, min_selection=1, config=MODERN) == [2]

    def test_checkbox_pages_by_ten_by_default(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\r")
        prompt_checkbox("Pick", [str(i) for i in range(12)], config=MODERN)
        out = capsys.readouterr().out
        assert "reveal more choices" in out

    def test_glyph_overrides_from_config(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\r")
        config = PromptConfig(profile=Profile.MODERN, glyphs={"unchecked": "[ ] "})
        prompt_checkbox("Pick", ["a"], config=config)
        assert "[ ] a" in capsys.readouterr().out


class TestConfirmPrompt:
    def test_yes(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"y\r")
        assert prompt_confirm("Sure?", config=MODERN) is True

    def test_default(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\r")
        assert prompt_confirm("Sure?", default=True, config=MODERN) is True


class TestInputPrompts:
    def test_prompt_input(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"bob smith\r")
        assert prompt_input("Name?", config=MODERN) == "bob smith"

    def test_prompt_input_default(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"\r")
        assert prompt_input("Name?", default="anon", config=MODERN) == "anon"

    def test_prompt_input_password_masks_output(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"hunter2\r")
        assert prompt_input_password("Password?", config=MODERN) == "hunter2"
        out = capsys.readouterr().out
        assert "*******" in out
        assert "hunter2" not in out

    def test_password_mask_from_config(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"abc\r")
        config = PromptConfig(profile=Profile.MODERN, password_mask="#")
        prompt_input_password("Password?", config=config)
        assert "###" in capsys.readouterr().out

    def test_prompt_input_number(self, scripted_terminal, capsys) -> None:
        scripted_terminal(b"1x2.5\r")
        assert prompt_input_number("Amount?", config=MODERN) == Decimal("12.5")


class TestConfigHandling:
    def test_env_config_used_when_none_given(self, scripted_terminal, capsys, monkeypatch) -> None:
        monkeypatch.setenv("TERMPROMPT_PROFILE", "legacy")
        scripted_terminal(b"\x1bOB\r")
        assert prompt_list("Pick", ["a", "b"]) == "b"

    def test_log_level_applied(self, scripted_terminal, capsys, package_logger) -> None:
        scripted_terminal(b"\r")
        config = PromptConfig(profile=Profile.MODERN, log_level="debug")
        prompt_confirm("Sure?", config=config)
        assert package_logger.level == logging.DEBUG
