"""Encoding of styled text for an output medium.

Styled text is a ``rich.text.Text``. Terminals get ANSI SGR sequences; any
other medium gets the literal characters only.
"""

from __future__ import annotations

import io
import os
import re
from typing import Literal, Optional, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text

ColorMode = Literal["auto", "always", "never"]

RESET = "\x1b[0m"
_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")

# Only used to resolve style names; nothing is ever printed through it.
_STYLE_CONSOLE = Console(file=io.StringIO(), color_system=None, force_terminal=False)


def encode(
    text: Text,
    styled: bool,
    color_system: ColorSystem = ColorSystem.STANDARD,
) -> str:
    """Turn styled text into a string for the target medium.

    With ``styled`` false the result is exactly ``text.plain``. Otherwise each
    styled run is wrapped in its escape sequence and a reset, so stripping the
    escapes gives back the plain string and no styling leaks past the end.
    """
    if not styled:
        return text.plain

    parts = []
    for segment in text.render(_STYLE_CONSOLE):
        if segment.style:
            parts.append(segment.style.render(segment.text, color_system=color_system))
        else:
            parts.append(segment.text)
    encoded = "".join(parts)
    if _SGR_RE.search(encoded) and not encoded.endswith(RESET):
        encoded += RESET
    return encoded


def strip_ansi(value: str) -> str:
    """Remove SGR escape sequences from ``value``."""
    return _SGR_RE.sub("", value)


def supports_styling(stream: Optional[TextIO], color: ColorMode = "auto") -> bool:
    """Decide whether output written to ``stream`` should carry styling.

    ``"always"`` and ``"never"`` force the answer. ``"auto"`` styles only
    interactive, non-dumb terminals, and never when ``NO_COLOR`` is set.
    """
    if color == "always":
        return True
    if color == "never" or stream is None:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    console = Console(file=stream)
    return console.is_terminal and not console.is_dumb_terminal


__all__ = ["ColorMode", "RESET", "encode", "strip_ansi", "supports_styling"]
