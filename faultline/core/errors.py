"""Exception types for faultline.

Error trees are plain data; these exceptions are how producing layers carry a
tree through ordinary Python control flow until something renders it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from faultline.core.error import ErrorNode


class FaultlineError(Exception):
    """Base exception for all faultline errors."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "An error occurred in faultline"


class DiagnosticError(FaultlineError):
    """Raised to propagate an error tree.

    The tree is available as ``error``; ``str()`` gives its plain rendering.
    """

    def __init__(self, error: "ErrorNode"):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


class ConfigError(FaultlineError):
    """Raised when a configuration value is invalid."""


__all__ = [
    "FaultlineError",
    "DiagnosticError",
    "ConfigError",
]
