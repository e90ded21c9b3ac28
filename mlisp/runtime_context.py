"""Process-wide runtime state: the active reader, the I/O ports and the
diagnostic policy.

The `read` and `write` primitives and every diagnostic go through here.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, TYPE_CHECKING

from mlisp.config import get_strict
from mlisp.errors import MLispError, SILENT_ERRORS

if TYPE_CHECKING:
    from mlisp.reader.parser import TokenStream

logger = logging.getLogger(__name__)

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_current_reader: Optional["TokenStream"] = None
_output_port: Optional[TextIO] = None
_error_port: Optional[TextIO] = None
_strict: Optional[bool] = None


def set_current_reader(reader: Optional["TokenStream"]) -> None:
    global _current_reader
    _current_reader = reader


def get_current_reader() -> "TokenStream":
    """Return the active reader, creating one over stdin on first use."""
    global _current_reader
    if _current_reader is None:
        from mlisp.reader.parser import Lexer, TokenStream
        _current_reader = TokenStream(Lexer(sys.stdin))
    return _current_reader


def set_output_port(port: Optional[TextIO]) -> None:
    global _output_port
    _output_port = port


def get_output_port() -> TextIO:
    return _output_port if _output_port is not None else sys.stdout


def set_error_port(port: Optional[TextIO]) -> None:
    global _error_port
    _error_port = port


def get_error_port() -> TextIO:
    return _error_port if _error_port is not None else sys.stderr


def set_strict(strict: Optional[bool]) -> None:
    """Force strict mode on or off; None falls back to MLISP_STRICT."""
    global _strict
    _strict = strict


def is_strict() -> bool:
    return get_strict() if _strict is None else _strict


def report(error: MLispError) -> None:
    """Emit a diagnostic for `error`; the caller substitutes absent.

    In strict mode the error is raised instead.
    """
    if is_strict():
        raise error
    if isinstance(error, SILENT_ERRORS):
        logger.debug("%s", error)
        return
    logger.debug("diagnostic: %s", error)
    port = get_error_port()
    port.write(f"{error}\n")
    port.flush()
