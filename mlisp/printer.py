"""Printer: renders values in canonical symbolic-expression form.

- absent -> null
- Symbol -> its name
- proper list -> (a b c)
- improper tail -> (a b . c)
- callables -> opaque placeholders such as <closure>; these do not read back
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

from mlisp import LispValue
from mlisp.types.lambda_fn import Closure, Macro
from mlisp.types.native import Primitive, Syntax
from mlisp.types.pair import Pair
from mlisp.types.symbol import Symbol

NIL_MARKER = "null"


def _write_obj(obj: LispValue, buffer: StringIO) -> None:
    if obj is None:
        buffer.write(NIL_MARKER)
    elif isinstance(obj, Symbol):
        buffer.write(obj.name)
    elif isinstance(obj, Pair):
        _write_pair(obj, buffer)
    elif isinstance(obj, Closure):
        buffer.write("<closure>")
    elif isinstance(obj, Macro):
        buffer.write("<macro>")
    elif isinstance(obj, (Primitive, Syntax)):
        buffer.write(repr(obj))
    else:
        buffer.write(f"<{type(obj).__name__}>")


def _write_pair(obj: Pair, buffer: StringIO) -> None:
    # Iterative over the spine so long lists do not recurse.
    buffer.write("(")
    _write_obj(obj.first, buffer)
    tail = obj.rest
    while isinstance(tail, Pair):
        buffer.write(" ")
        _write_obj(tail.first, buffer)
        tail = tail.rest
    if tail is not None:
        buffer.write(" . ")
        _write_obj(tail, buffer)
    buffer.write(")")


def to_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write_obj(obj, buffer)
        return buffer.getvalue()


def write(obj: LispValue, port: TextIO) -> None:
    """Write the rendering of `obj` followed by a newline."""
    port.write(to_string(obj))
    port.write("\n")
    port.flush()
