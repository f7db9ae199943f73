"""Helpers for building error trees while exceptions propagate."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from faultline.core.error import Anchor, ErrorNode, leaf, wrap
from faultline.core.errors import DiagnosticError
from faultline.core.messages import ExceptionMessage, POSIXMessage

T = TypeVar("T")
R = TypeVar("R")


def from_exception(
    exc: BaseException,
    anchor: Optional[Anchor] = None,
    *,
    show_traceback: Optional[bool] = None,
) -> ErrorNode:
    """Convert an exception into an error tree.

    A ``DiagnosticError`` already carries a tree and is returned as is.
    ``show_traceback`` defaults to the configured ``show_tracebacks``.
    """
    if isinstance(exc, DiagnosticError):
        return exc.error
    if isinstance(exc, OSError) and exc.errno is not None:
        return leaf(POSIXMessage(exc), anchor)
    if show_traceback is None:
        from faultline.core.config import get_config

        show_traceback = get_config().show_tracebacks
    return leaf(ExceptionMessage(exc, show_traceback=show_traceback), anchor)


def collect(items: Iterable[T], func: Callable[[T], R], message: Any) -> List[R]:
    """Apply ``func`` to every item, failing once for all failures.

    Every item is processed even after a failure. If any call raised
    ``DiagnosticError``, one ``DiagnosticError`` is raised whose tree has
    ``message`` at the root and each failure as a cause, in item order.
    """
    results: List[R] = []
    failures: List[ErrorNode] = []
    for item in items:
        try:
            results.append(func(item))
        except DiagnosticError as exc:
            failures.append(exc.error)
    if failures:
        raise DiagnosticError(wrap(message, failures))
    return results


@contextmanager
def error_context(message: Any, anchor: Optional[Anchor] = None) -> Iterator[None]:
    """Add ``message`` as a parent to any diagnostic raised in the block.

    ``OSError`` from the block is converted to a diagnostic first. Other
    exceptions pass through untouched.
    """
    try:
        yield
    except (DiagnosticError, OSError) as exc:
        raise DiagnosticError(wrap(message, [from_exception(exc)], anchor)) from exc


__all__ = ["from_exception", "collect", "error_context"]
