"""Built-in functions for the qlisp runtime environment.

Every handler receives the entire unevaluated call form, `(name arg ...)`, and
evaluates its own operands. This module defines arithmetic, comparison,
printing, list access, timing, and the registration of the global bindings.
"""
from __future__ import annotations

import time
from typing import Callable

from qlisp import EvaluatorFn, LispValue, SExpression
from qlisp.builtin import operations
from qlisp.evaluation.special_forms import SPECIAL_FORMS
from qlisp.printer import to_string
from qlisp.runtime_context import RuntimeContext
from qlisp.sysinfo import current_process_memory_bytes
from qlisp.types.environment import Environment
from qlisp.types.errors import QlispArityError, QlispTypeError
from qlisp.types.objects import (
    LispObject,
    ObjType,
    NIL,
    TRUE,
    FALSE,
    ELSE,
    is_list,
    make_builtin,
    make_list,
    make_number,
    make_string,
)

BinaryOp = Callable[[LispObject, LispObject], LispObject]
Handler = Callable[[SExpression, RuntimeContext, EvaluatorFn], LispValue]


def check_operand_count(name: str, form: SExpression, n: int) -> None:
    given = len(form) - 1
    if given != n:
        raise QlispArityError(f"{name} takes exactly {n} operand(s), {given} given")


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(name: str, op: BinaryOp) -> Handler:
    """Left-to-right fold over two or more operands."""
    def handler(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
        if len(form) - 1 < 2:
            raise QlispArityError(f"{name} operator can't have less than two arguments")
        result = evaluate_fn(form[1], ctx)
        for operand in form.value[2:]:
            result = op(result, evaluate_fn(operand, ctx))
        return result
    handler.__name__ = f"fold_{op.__name__}"
    return handler


def _binary(name: str, op: BinaryOp) -> Handler:
    """Exactly two operands, evaluated left then right."""
    def handler(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
        given = len(form) - 1
        if given != 2:
            raise QlispArityError(f"{name} takes exactly 2 operands, {given} was given")
        left = evaluate_fn(form[1], ctx)
        right = evaluate_fn(form[2], ctx)
        return op(left, right)
    handler.__name__ = f"binary_{op.__name__}"
    return handler


add_objects = _fold("Add (+)", operations.add)
sub_objects = _fold("Subtraction (-)", operations.subtract)
mul_objects = _binary("*", operations.multiply)
div_objects = _binary("/", operations.divide)
pow_objects = _binary("**", operations.power)
equal_builtin = _binary("=", operations.equals)
gt_builtin = _binary(">", operations.greater_than)
lt_builtin = _binary("<", operations.less_than)


# -------------------------------
# Output
# -------------------------------
def print_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """Print operands' display text with no separator, then a newline. Returns nil."""
    parts = [to_string(evaluate_fn(arg, ctx)) for arg in form.value[1:]]
    ctx.write("".join(parts) + "\n")
    return NIL


# -------------------------------
# List operations
# -------------------------------
def _list_operand(name: str, form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispObject:
    check_operand_count(name, form, 1)
    value = evaluate_fn(form[1], ctx)
    if not is_list(value):
        raise QlispTypeError(f"{name} only operates on lists, got {to_string(value)}")
    return value


def car_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    lst = _list_operand("car", form, ctx, evaluate_fn)
    return lst[0] if len(lst) >= 1 else NIL


def cadr_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    lst = _list_operand("cadr", form, ctx, evaluate_fn)
    return lst[1] if len(lst) >= 2 else NIL


def cdr_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """New list of elements from index 1 on.

    An empty or single-element list is returned unchanged rather than emptied.
    """
    lst = _list_operand("cdr", form, ctx, evaluate_fn)
    if len(lst) <= 1:
        return lst
    return make_list(lst.value[1:]).mark_evaluated()


# -------------------------------
# Process / timing
# -------------------------------
def memtotal_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    check_operand_count("memtotal", form, 0)
    return make_number(current_process_memory_bytes())


def timeit_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate the operand once, discard it, return elapsed milliseconds as text."""
    check_operand_count("timeit", form, 1)
    start = time.perf_counter()
    evaluate_fn(form[1], ctx)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return make_string(f"{elapsed_ms:f}")


def sleep_builtin(form: SExpression, ctx: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """Block for the given number of milliseconds. Returns nil.

    The operand is evaluated, so `(sleep (* 2 5))` and `(sleep delay)` work as
    well as a literal number.
    """
    check_operand_count("sleep", form, 1)
    ms = evaluate_fn(form[1], ctx)
    if ms.type is not ObjType.NUMBER or ms.value < 0:
        raise QlispTypeError(f"sleep expects a non-negative number of milliseconds, got {to_string(ms)}")
    time.sleep(ms.value / 1000.0)
    return NIL


BUILTINS: dict[str, Handler] = {
    "+": add_objects,
    "-": sub_objects,
    "/": div_objects,
    "*": mul_objects,
    "**": pow_objects,
    "=": equal_builtin,
    ">": gt_builtin,
    "<": lt_builtin,
    "print": print_builtin,
    "car": car_builtin,
    "cdr": cdr_builtin,
    "cadr": cadr_builtin,
    "memtotal": memtotal_builtin,
    "timeit": timeit_builtin,
    "sleep": sleep_builtin,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Install constants, builtins and special forms in `env`."""
    env.update({
        "nil": NIL,
        "true": TRUE,
        "false": FALSE,
        "else": ELSE,
    })
    for name, handler in {**BUILTINS, **SPECIAL_FORMS}.items():
        env.define(name, make_builtin(name, handler))
