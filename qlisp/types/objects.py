"""Tagged object model for qlisp.

Code and data share one representation: a LispObject carrying a type tag, a
payload, and a small flag set. The flags are evaluation state, not type
information, which is why plain Python values are not used directly:

    - EVALUATED:    the object is in final form; evaluating it is a no-op.
    - LIST_LITERAL: a quoted list; evaluates element-wise instead of as a call.
    - LAMBDA:       an anonymous function; its parameter list has no name slot.

Singletons (NIL, TRUE, FALSE, DOT, ELSE) are created once at import time,
marked EVALUATED, and shared by reference everywhere.
"""

from __future__ import annotations

import sys
from enum import Enum, IntFlag
from typing import Callable, Optional


class ObjType(Enum):
    NIL = "nil"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    LIST = "list"
    FUNCTION = "function"
    BUILTIN = "builtin"


class ObjFlag(IntFlag):
    NONE = 0
    EVALUATED = 1
    LIST_LITERAL = 2
    LAMBDA = 4


class FunctionValue:
    """Payload of a user-defined function: parameter list and defining form.

    No environment is stored: calls chain onto the caller's scope.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: LispObject, body: LispObject):
        self.params = params
        self.body = body


class BuiltinValue:
    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: Callable):
        self.name = name
        self.handler = handler


class LispObject:
    __slots__ = ("type", "value", "flags")

    def __init__(self, type_: ObjType, value=None, flags: ObjFlag = ObjFlag.NONE):
        self.type: ObjType = type_
        self.value = value
        self.flags: ObjFlag = flags

    # --- flags ---
    @property
    def evaluated(self) -> bool:
        return bool(self.flags & ObjFlag.EVALUATED)

    def mark_evaluated(self) -> LispObject:
        self.flags |= ObjFlag.EVALUATED
        return self

    @property
    def is_literal(self) -> bool:
        return bool(self.flags & ObjFlag.LIST_LITERAL)

    @property
    def is_lambda(self) -> bool:
        return bool(self.flags & ObjFlag.LAMBDA)

    # Python truthiness must not fall through to __len__; Lisp truthiness is is_truthy()
    def __bool__(self) -> bool:
        return True

    # --- list helpers ---
    def __len__(self) -> int:
        if self.type is not ObjType.LIST:
            raise TypeError(f"{self.type.value} object has no length")
        return len(self.value)

    def __getitem__(self, index):
        if self.type is not ObjType.LIST:
            raise TypeError(f"{self.type.value} object is not indexable")
        return self.value[index]

    def __iter__(self):
        if self.type is not ObjType.LIST:
            raise TypeError(f"{self.type.value} object is not iterable")
        return iter(self.value)

    def __repr__(self) -> str:
        from qlisp.printer import to_repr
        return to_repr(self)

    def __str__(self) -> str:
        from qlisp.printer import to_string
        return to_string(self)


# -------------------------------
# Constructors
# -------------------------------
def make_number(value: int) -> LispObject:
    return LispObject(ObjType.NUMBER, int(value))


def make_string(value: str) -> LispObject:
    return LispObject(ObjType.STRING, value)


def make_symbol(name: str) -> LispObject:
    # Interned so that name comparisons and scope lookups stay cheap
    return LispObject(ObjType.SYMBOL, sys.intern(name))


def make_list(items: Optional[list[LispObject]] = None, literal: bool = False) -> LispObject:
    flags = ObjFlag.LIST_LITERAL if literal else ObjFlag.NONE
    return LispObject(ObjType.LIST, list(items) if items is not None else [], flags)


def make_function(params: LispObject, body: LispObject, anonymous: bool) -> LispObject:
    flags = ObjFlag.LAMBDA if anonymous else ObjFlag.NONE
    return LispObject(ObjType.FUNCTION, FunctionValue(params, body), flags)


def make_builtin(name: str, handler: Callable) -> LispObject:
    return LispObject(ObjType.BUILTIN, BuiltinValue(name, handler), ObjFlag.EVALUATED)


# -------------------------------
# Singletons
# -------------------------------
NIL = LispObject(ObjType.NIL, None, ObjFlag.EVALUATED)
TRUE = LispObject(ObjType.BOOL, True, ObjFlag.EVALUATED)
FALSE = LispObject(ObjType.BOOL, False, ObjFlag.EVALUATED)
# Compared by identity only; the display text is cosmetic.
DOT = LispObject(ObjType.SYMBOL, ".", ObjFlag.EVALUATED)
ELSE = LispObject(ObjType.SYMBOL, "else", ObjFlag.EVALUATED)


def wrap_bool(value: bool) -> LispObject:
    return TRUE if value else FALSE


def is_truthy(obj: LispObject) -> bool:
    return obj is not NIL and obj is not FALSE


def is_list(obj: LispObject) -> bool:
    return obj.type is ObjType.LIST


def is_symbol(obj: LispObject) -> bool:
    return obj.type is ObjType.SYMBOL and obj is not DOT and obj is not ELSE


def is_callable(obj: LispObject) -> bool:
    return obj.type is ObjType.FUNCTION or obj.type is ObjType.BUILTIN


def function_name(obj: LispObject) -> str:
    """Display name of a Function or Builtin object."""
    if obj.type is ObjType.BUILTIN:
        return obj.value.name
    if obj.is_lambda:
        return "lambda"
    params = obj.value.params
    if len(params) and params[0].type is ObjType.SYMBOL:
        return params[0].value
    return "lambda"
