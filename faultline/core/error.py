"""Error trees: a failure plus the chain of operations it affected."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from faultline.core.messages import Formattable, as_message
from faultline.core.source_file import SourceFile


@dataclass(frozen=True)
class Anchor:
    """Where in the source an error applies. ``line`` is 1-based."""

    file: Optional[SourceFile] = None
    line: Optional[int] = None

    @classmethod
    def at(cls, src: Optional[str], line: Optional[int], in_data: Optional[str] = None) -> "Anchor":
        return cls(SourceFile(src=src, in_data=in_data), line)


@dataclass(frozen=True)
class ErrorNode:
    """One node of an error tree.

    Nodes are immutable. ``causes`` keeps the order it was given in; use
    ``prewalk`` to derive a rewritten tree.
    """

    message: Formattable
    anchor: Optional[Anchor] = None
    causes: Tuple["ErrorNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.message, Formattable):
            object.__setattr__(self, "message", as_message(self.message))
        if not isinstance(self.causes, tuple):
            object.__setattr__(self, "causes", tuple(self.causes))

    @property
    def file(self) -> Optional[SourceFile]:
        return self.anchor.file if self.anchor else None

    @property
    def line(self) -> Optional[int]:
        return self.anchor.line if self.anchor else None

    def __str__(self) -> str:
        from faultline.core.report import format_error

        return format_error(self)


def leaf(message: Any, anchor: Optional[Anchor] = None) -> ErrorNode:
    """Build a node with no causes."""
    return ErrorNode(as_message(message), anchor, ())


def wrap(message: Any, causes: Iterable[ErrorNode], anchor: Optional[Anchor] = None) -> ErrorNode:
    """Build a node caused by ``causes``, kept in the order supplied."""
    return ErrorNode(as_message(message), anchor, tuple(causes))


def prewalk(node: ErrorNode, transform: Callable[[ErrorNode], ErrorNode]) -> ErrorNode:
    """Apply ``transform`` to every node in pre-order and return the new tree.

    ``transform`` sees a node before any of its children have been rewritten.
    The input tree is left untouched; subtrees the transform did not change
    are shared with the result.

    The walk keeps its own stack, so trees of any depth can be rewritten.
    """
    # Each frame is a transformed node and its causes rewritten so far.
    stack: List[Tuple[ErrorNode, List[ErrorNode]]] = [(transform(node), [])]
    while True:
        current, done = stack[-1]
        if len(done) < len(current.causes):
            stack.append((transform(current.causes[len(done)]), []))
            continue

        stack.pop()
        if all(new is old for new, old in zip(done, current.causes)):
            rebuilt = current
        else:
            rebuilt = replace(current, causes=tuple(done))
        if not stack:
            return rebuilt
        stack[-1][1].append(rebuilt)


def relativize_paths(node: ErrorNode, base: Union[str, Path]) -> ErrorNode:
    """Rewrite anchored file paths under ``base`` to be relative to it."""
    base_path = Path(os.path.abspath(base))

    def _relativize(current: ErrorNode) -> ErrorNode:
        source = current.file
        if source is None or not source.src:
            return current
        try:
            relative = Path(os.path.abspath(source.src)).relative_to(base_path)
        except ValueError:
            return current
        if str(relative) == source.src:
            return current
        anchor = replace(current.anchor, file=source.with_src(str(relative)))
        return replace(current, anchor=anchor)

    return prewalk(node, _relativize)


__all__ = [
    "Anchor",
    "ErrorNode",
    "leaf",
    "wrap",
    "prewalk",
    "relativize_paths",
]
