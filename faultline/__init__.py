"""faultline - error trees with source-context diagnostics.

Failures are described as trees of causes, each optionally anchored to a
line of a source file, and rendered like compiler diagnostics::

    from faultline import Anchor, SourceFile, leaf, wrap, print_error

    source = SourceFile(src="templates/base.html.eex", in_data=text)
    error = wrap("failed to parse template", [leaf("unexpected token", Anchor(source, 5))])
    print_error(error)
"""

__version__ = "0.1.0"

from faultline.core.error import Anchor, ErrorNode, leaf, prewalk, relativize_paths, wrap
from faultline.core.errors import ConfigError, DiagnosticError, FaultlineError
from faultline.core.messages import (
    CycleMessage,
    ExceptionMessage,
    Formattable,
    POSIXMessage,
    SimpleMessage,
)
from faultline.core.renderer import render
from faultline.core.report import format_error, print_error
from faultline.core.result import collect, error_context, from_exception
from faultline.core.source_file import SourceFile, load_source_file
from faultline.core.source_window import SourceLine, SourceWindow, extract_window
from faultline.utils.ansi import encode, strip_ansi, supports_styling

__all__ = [
    "__version__",
    "Anchor",
    "ErrorNode",
    "leaf",
    "wrap",
    "prewalk",
    "relativize_paths",
    "FaultlineError",
    "DiagnosticError",
    "ConfigError",
    "Formattable",
    "SimpleMessage",
    "ExceptionMessage",
    "POSIXMessage",
    "CycleMessage",
    "render",
    "format_error",
    "print_error",
    "collect",
    "error_context",
    "from_exception",
    "SourceFile",
    "load_source_file",
    "SourceLine",
    "SourceWindow",
    "extract_window",
    "encode",
    "strip_ansi",
    "supports_styling",
]
