"""Message payloads attached to error nodes.

Every message implements the ``Formattable`` protocol: it can render itself to
styled text. The renderer only ever calls ``format_text`` and never looks
inside a message.
"""

from __future__ import annotations

import errno
import os
import traceback
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, Tuple, Union, runtime_checkable

from rich.text import Text


@runtime_checkable
class Formattable(Protocol):
    """Anything that can render itself to styled text."""

    def format_text(self) -> Text: ...


@dataclass(frozen=True)
class SimpleMessage:
    """A plain line (or lines) of text."""

    text: str

    def format_text(self) -> Text:
        return Text(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ExceptionMessage:
    """Describes a Python exception, optionally with its traceback."""

    exception: BaseException
    show_traceback: bool = False

    def _summary(self) -> str:
        name = type(self.exception).__name__
        detail = str(self.exception)
        return f"{name}: {detail}" if detail else name

    def format_text(self) -> Text:
        text = Text(self._summary())
        if self.show_traceback and self.exception.__traceback__ is not None:
            frames = traceback.format_tb(self.exception.__traceback__)
            text.append("\n")
            text.append("".join(frames).rstrip("\n"), style="dim")
        return text

    def __str__(self) -> str:
        return self.format_text().plain


@dataclass(frozen=True)
class POSIXMessage:
    """An operating system error, given as an errno or an ``OSError``."""

    reason: Union[int, OSError]

    @property
    def code(self) -> Union[int, None]:
        if isinstance(self.reason, OSError):
            return self.reason.errno
        return self.reason

    def _describe(self) -> str:
        code = self.code
        if code is None:
            return str(self.reason)
        description = os.strerror(code)
        name = errno.errorcode.get(code)
        if name:
            description = f"{description} ({name})"
        filename = getattr(self.reason, "filename", None)
        if filename is not None:
            description = f"{filename}: {description}"
        return description

    def format_text(self) -> Text:
        return Text(self._describe())

    def __str__(self) -> str:
        return self._describe()


@dataclass(frozen=True)
class CycleMessage:
    """A dependency cycle, such as templates that include each other."""

    cycle: Tuple[str, ...]

    def __init__(self, cycle: Sequence[str]):
        object.__setattr__(self, "cycle", tuple(cycle))

    def format_text(self) -> Text:
        text = Text("cycle detected:")
        for index, member in enumerate(self.cycle):
            text.append("\n  ")
            if index:
                text.append("-> ", style="dim")
            text.append(member, style="bold")
        return text

    def __str__(self) -> str:
        return self.format_text().plain


def as_message(value: Any) -> Formattable:
    """Coerce ``value`` into a Formattable message."""
    if isinstance(value, Formattable):
        return value
    if isinstance(value, OSError) and value.errno is not None:
        return POSIXMessage(value)
    if isinstance(value, BaseException):
        return ExceptionMessage(value)
    return SimpleMessage("" if value is None else str(value))


__all__ = [
    "Formattable",
    "SimpleMessage",
    "ExceptionMessage",
    "POSIXMessage",
    "CycleMessage",
    "as_message",
]
