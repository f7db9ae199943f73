"""Writing rendered error trees to text streams."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from faultline.core.config import FaultlineConfig, get_config
from faultline.core.error import ErrorNode, relativize_paths
from faultline.core.renderer import render
from faultline.core.source_window import CONTEXT_LINES
from faultline.core.theme import Theme, get_theme
from faultline.utils.ansi import encode, supports_styling
from faultline.utils.log import get_logger

logger = get_logger()


def format_error(
    error: ErrorNode,
    *,
    styled: bool = False,
    theme: Optional[Theme] = None,
    context_lines: int = CONTEXT_LINES,
) -> str:
    """Render ``error`` to a string, with or without ANSI styling."""
    return encode(render(error, theme=theme, context_lines=context_lines), styled)


def print_error(
    error: ErrorNode,
    file: Optional[TextIO] = None,
    *,
    config: Optional[FaultlineConfig] = None,
) -> None:
    """Write ``error`` to ``file`` (stderr by default), followed by a newline.

    Styling, theme, snippet size and path normalization follow ``config``,
    or the global configuration when it is omitted.
    """
    stream = file if file is not None else sys.stderr
    config = config or get_config()
    styled = supports_styling(stream, config.color)

    if config.relative_paths:
        error = relativize_paths(error, os.getcwd())

    logger.debug(
        "[report] Writing error tree",
        extra={"styled": styled, "theme": config.theme, "causes": len(error.causes)},
    )
    text = format_error(
        error,
        styled=styled,
        theme=get_theme(config.theme),
        context_lines=config.context_lines,
    )
    stream.write(text + "\n")
    stream.flush()


__all__ = ["format_error", "print_error"]
