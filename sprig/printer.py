"""Textual rendering of Sprig values for the REPL and error messages."""

from __future__ import annotations

from io import StringIO

from sprig import LispValue
from sprig.types.cons import Cons
from sprig.types.lambda_fn import Lambda
from sprig.types.nil import NilType
from sprig.types.operation import Operation
from sprig.types.symbol import Symbol

_STRING_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def render_string(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in value) + '"'


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case bool():
            buffer.write("#t" if value else "#f")
        case int() | float():
            buffer.write(repr(value))
        case str():
            buffer.write(render_string(value))
        case Symbol():
            buffer.write(value.id)
        case NilType():
            buffer.write("#nil")
        case Operation():
            buffer.write(value.value)
        case Cons(head=head, tail=tail):
            buffer.write("(")
            _write(head, buffer)
            buffer.write(" . ")
            _write(tail, buffer)
            buffer.write(")")
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case Lambda():
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in value.formals))
            buffer.write(") ")
            _write(value.body, buffer)
            buffer.write(")")
        case _:
            buffer.write(repr(value))


def to_lisp(value: LispValue) -> str:
    """Render `value` the way the REPL prints it."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
