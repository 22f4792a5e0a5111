"""Binary object operations used by the arithmetic and comparison builtins.

Each takes two evaluated LispObjects and returns a new LispObject, raising a
QlispRuntimeError subclass on a type mismatch.
"""
from __future__ import annotations

from qlisp.types.errors import QlispTypeError, QlispZeroDivisionError
from qlisp.types.objects import LispObject, ObjType, make_number, make_string, wrap_bool


def _describe(obj: LispObject) -> str:
    return f"{obj!r} ({obj.type.value})"


def _numbers(name: str, a: LispObject, b: LispObject) -> tuple[int, int]:
    if a.type is not ObjType.NUMBER or b.type is not ObjType.NUMBER:
        raise QlispTypeError(f"{name} is not defined for {_describe(a)} and {_describe(b)}")
    return a.value, b.value


def add(a: LispObject, b: LispObject) -> LispObject:
    if a.type is ObjType.STRING and b.type is ObjType.STRING:
        return make_string(a.value + b.value)
    x, y = _numbers("+", a, b)
    return make_number(x + y)


def subtract(a: LispObject, b: LispObject) -> LispObject:
    x, y = _numbers("-", a, b)
    return make_number(x - y)


def multiply(a: LispObject, b: LispObject) -> LispObject:
    x, y = _numbers("*", a, b)
    return make_number(x * y)


def divide(a: LispObject, b: LispObject) -> LispObject:
    x, y = _numbers("/", a, b)
    if y == 0:
        raise QlispZeroDivisionError("Division by zero")
    # Truncate toward zero like C integer division
    q = abs(x) // abs(y)
    return make_number(q if (x >= 0) == (y >= 0) else -q)


def power(a: LispObject, b: LispObject) -> LispObject:
    x, y = _numbers("**", a, b)
    if y < 0:
        raise QlispTypeError("** requires a non-negative integer exponent")
    return make_number(x ** y)


def equals(a: LispObject, b: LispObject) -> LispObject:
    if a is b:
        return wrap_bool(True)
    if a.type is not b.type:
        return wrap_bool(False)
    if a.type in (ObjType.NUMBER, ObjType.STRING, ObjType.SYMBOL):
        return wrap_bool(a.value == b.value)
    return wrap_bool(False)


def _ordered(name: str, a: LispObject, b: LispObject):
    if a.type is b.type and a.type in (ObjType.NUMBER, ObjType.STRING):
        return a.value, b.value
    raise QlispTypeError(f"{name} is not defined for {_describe(a)} and {_describe(b)}")


def greater_than(a: LispObject, b: LispObject) -> LispObject:
    x, y = _ordered(">", a, b)
    return wrap_bool(x > y)


def less_than(a: LispObject, b: LispObject) -> LispObject:
    x, y = _ordered("<", a, b)
    return wrap_bool(x < y)
