"""Tests for diagnostic themes."""

import dataclasses

from faultline.core.theme import BUILTIN_THEMES, THEME_DEFAULT, ThemeColors, get_theme, list_themes


def test_builtin_themes_are_listed():
    assert list_themes() == ["default", "light", "monochrome"]
    assert all(BUILTIN_THEMES[name].name == name for name in list_themes())


def test_get_theme_by_name():
    assert get_theme("light") is BUILTIN_THEMES["light"]


def test_unknown_theme_falls_back_to_default():
    assert get_theme("neon") is THEME_DEFAULT


def test_default_theme_styles():
    colors = THEME_DEFAULT.colors
    assert colors.cause_marker == "red"
    assert colors.gutter == "bright_black"
    assert colors.current_line == "bold yellow"
    assert colors.context_line == ""


def test_theme_slots():
    slots = [f.name for f in dataclasses.fields(ThemeColors)]
    assert slots == ["location", "cause_marker", "gutter", "current_line", "context_line"]
