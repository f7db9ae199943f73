"""File references attached to error anchors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from faultline.utils.log import get_logger

logger = get_logger()


@dataclass(frozen=True)
class SourceFile:
    """A source path, optionally with the already-loaded file contents.

    Either part may be missing: without ``src`` no location is printed,
    without ``in_data`` no source snippet can be shown.
    """

    src: Optional[str] = None
    in_data: Optional[str] = None

    def with_src(self, src: str) -> "SourceFile":
        return SourceFile(src=src, in_data=self.in_data)


def load_source_file(path: Union[str, Path]) -> SourceFile:
    """Read ``path`` as UTF-8 text.

    Raises:
        DiagnosticError: the file could not be read or decoded. The error is
            anchored at ``path`` (without a line).
    """
    from faultline.core.error import Anchor, leaf
    from faultline.core.errors import DiagnosticError
    from faultline.core.messages import as_message

    src = str(path)
    try:
        data = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(
            "[source] Failed to read source file",
            extra={"path": src, "error": str(exc)},
        )
        anchor = Anchor(SourceFile(src=src))
        raise DiagnosticError(leaf(as_message(exc), anchor)) from exc

    logger.debug("[source] Loaded source file", extra={"path": src, "length": len(data)})
    return SourceFile(src=src, in_data=data)


__all__ = ["SourceFile", "load_source_file"]
