"""Theme system for faultline diagnostics.

A theme maps the renderer's style slots to rich style strings. Themes are
plain values passed to the renderer; there is no process-wide current theme.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from faultline.utils.log import get_logger

logger = get_logger()


@dataclass(frozen=True)
class ThemeColors:
    """Theme color definitions - all semantic style slots."""

    # === Header ===
    location: str = "bold"  # "<file>:<line>: " prefix

    # === Cause tree ===
    cause_marker: str = "red"

    # === Source snippet ===
    gutter: str = "bright_black"  # line numbers and " | " separators
    current_line: str = "bold yellow"
    context_line: str = ""


@dataclass(frozen=True)
class Theme:
    """Complete theme definition."""

    name: str
    display_name: str
    description: str
    colors: ThemeColors = field(default_factory=ThemeColors)


# === Predefined themes ===

THEME_DEFAULT = Theme(
    name="default",
    display_name="Default",
    description="Red cause markers and a bright yellow failing line",
    colors=ThemeColors(),
)

THEME_LIGHT = Theme(
    name="light",
    display_name="Light",
    description="Darker colors for bright terminals",
    colors=ThemeColors(
        cause_marker="dark_red",
        gutter="grey50",
        current_line="bold blue",
    ),
)

THEME_MONOCHROME = Theme(
    name="monochrome",
    display_name="Monochrome",
    description="Bold and dim only, no colors",
    colors=ThemeColors(
        cause_marker="bold",
        gutter="dim",
        current_line="bold",
        context_line="",
    ),
)

# Theme registry
BUILTIN_THEMES: Dict[str, Theme] = {
    "default": THEME_DEFAULT,
    "light": THEME_LIGHT,
    "monochrome": THEME_MONOCHROME,
}


def get_theme(name: str) -> Theme:
    """Look up a built-in theme, falling back to the default one."""
    theme = BUILTIN_THEMES.get(name)
    if theme is None:
        logger.warning(
            "[theme] Unknown theme %r; using default",
            name,
            extra={"available": list(BUILTIN_THEMES)},
        )
        return THEME_DEFAULT
    return theme


def list_themes() -> List[str]:
    """List all available theme names."""
    return list(BUILTIN_THEMES.keys())


__all__ = [
    "Theme",
    "ThemeColors",
    "BUILTIN_THEMES",
    "THEME_DEFAULT",
    "get_theme",
    "list_themes",
]
