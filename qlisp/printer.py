"""Conversion of LispObjects back to text.

to_string() is the display form used by `print` and the interactive loop:
strings render as their raw text. to_repr() quotes strings and is meant for
debugging only.
"""

from __future__ import annotations

from io import StringIO

from qlisp.types.objects import LispObject, ObjType, DOT, ELSE, function_name


def _write(obj: LispObject, buffer: StringIO, quote_strings: bool) -> None:
    t = obj.type
    if t is ObjType.NIL:
        buffer.write("nil")
    elif t is ObjType.BOOL:
        buffer.write("true" if obj.value else "false")
    elif t is ObjType.NUMBER:
        buffer.write(str(obj.value))
    elif t is ObjType.STRING:
        buffer.write(f'"{obj.value}"' if quote_strings else obj.value)
    elif t is ObjType.SYMBOL:
        if obj is DOT:
            buffer.write(".")
        elif obj is ELSE:
            buffer.write("else")
        else:
            buffer.write(obj.value)
    elif t is ObjType.LIST:
        buffer.write("(")
        first = True
        for item in obj.value:
            if not first:
                buffer.write(" ")
            _write(item, buffer, quote_strings)
            first = False
        buffer.write(")")
    elif t is ObjType.FUNCTION:
        if obj.is_lambda:
            buffer.write("<lambda>")
        else:
            buffer.write(f"<function {function_name(obj)}>")
    elif t is ObjType.BUILTIN:
        buffer.write(f"<builtin {obj.value.name}>")


def to_string(obj: LispObject) -> str:
    with StringIO() as buffer:
        _write(obj, buffer, quote_strings=False)
        return buffer.getvalue()


def to_repr(obj: LispObject) -> str:
    with StringIO() as buffer:
        _write(obj, buffer, quote_strings=True)
        return buffer.getvalue()
