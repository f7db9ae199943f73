"""Rendering of error trees into styled text.

A rendered node is its header (``file:line: `` and the message), an optional
snippet of the source around the anchored line, then each cause rendered one
level deeper::

    failed to parse template
    - templates/base.html.eex:5: unexpected token

      2 | <head>
      3 |   <title><%= @title %></title>
      4 | </head>
      5 | <body <%= if %>
      6 |   <main>
      7 |     <%= @contents %>
      8 |   </main>
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from faultline.core.error import Anchor, ErrorNode
from faultline.core.source_window import CONTEXT_LINES, SourceLine, extract_window
from faultline.core.theme import THEME_DEFAULT, Theme
from faultline.utils.log import get_logger

logger = get_logger()

INDENT = "  "
CAUSE_MARKER = "- "
GUTTER_SEPARATOR = " | "


def render(
    error: ErrorNode,
    indent: int = 0,
    *,
    theme: Optional[Theme] = None,
    context_lines: int = CONTEXT_LINES,
) -> Text:
    """Render ``error`` and all of its causes.

    Args:
        error: Root of the tree to render.
        indent: Nesting level of ``error``. Nodes above level 0 get a cause
            marker on their first line.
        theme: Styles to use; the default theme if omitted.
        context_lines: Source lines shown on each side of an anchored line.

    Returns:
        The rendered tree, without a trailing newline. Missing anchors, source
        text or messages only leave out the matching piece; this never raises.
    """
    theme = theme or THEME_DEFAULT

    blocks = []
    pending = [(error, indent)]
    while pending:
        node, level = pending.pop()
        blocks.append(_indented(_format_node(node, theme, context_lines), level, theme))
        pending.extend((cause, level + 1) for cause in reversed(node.causes))
    return Text("\n").join(blocks)


def _format_node(node: ErrorNode, theme: Theme, context_lines: int) -> Text:
    head = _format_location(node.anchor, theme)
    head.append_text(node.message.format_text())
    snippet = _format_snippet(node.anchor, theme, context_lines)
    if snippet is not None:
        head.append("\n\n")
        head.append_text(snippet)
    return head


def _format_location(anchor: Optional[Anchor], theme: Theme) -> Text:
    if anchor is None or anchor.file is None or not anchor.file.src or anchor.line is None:
        return Text()
    return Text().append(f"{anchor.file.src}:{anchor.line}: ", style=theme.colors.location)


def _format_snippet(anchor: Optional[Anchor], theme: Theme, context_lines: int) -> Optional[Text]:
    if anchor is None or anchor.file is None:
        return None

    window = extract_window(anchor.file.in_data, anchor.line, context_lines)
    if window is None:
        if anchor.file.in_data is not None:
            logger.debug(
                "[render] No source window for anchor",
                extra={"path": anchor.file.src, "line": anchor.line},
            )
        return None

    width = window.gutter_width
    lines = [_format_other_line(line, width, theme) for line in window.before]
    lines.append(_format_current_line(window.current, width, theme))
    lines.extend(_format_other_line(line, width, theme) for line in window.after)
    return Text("\n").join(lines)


def _format_current_line(line: SourceLine, width: int, theme: Theme) -> Text:
    colors = theme.colors
    text = Text()
    text.append(f"{line.number:<{width}}", style=colors.current_line)
    text.append(GUTTER_SEPARATOR, style=colors.gutter)
    text.append(line.text, style=colors.current_line)
    return text


def _format_other_line(line: SourceLine, width: int, theme: Theme) -> Text:
    colors = theme.colors
    text = Text()
    text.append(f"{line.number:<{width}}{GUTTER_SEPARATOR}", style=colors.gutter)
    text.append(line.text, style=colors.context_line)
    return text


def _indented(block: Text, indent: int, theme: Theme) -> Text:
    """Prefix the first line with a cause marker and indent the rest.

    Blank lines are kept blank.
    """
    if indent == 0:
        return block

    first, *rest = block.split("\n", allow_blank=True)
    text = Text(INDENT * (indent - 1))
    text.append(CAUSE_MARKER, style=theme.colors.cause_marker)
    text.append_text(first)
    for line in rest:
        text.append("\n")
        if line.plain:
            text.append(INDENT * indent)
            text.append_text(line)
    return text


__all__ = ["render", "INDENT", "CAUSE_MARKER", "GUTTER_SEPARATOR"]
