"""Core evaluator for the qlisp interpreter.

Dispatches on object shape. The EVALUATED flag short-circuits everything: an
object carrying it is returned as-is, which is also how symbol values and list
literals are memoized after their first evaluation.

Recoverable errors raised by a builtin handler or by the call protocol are
reported here, at the boundary of the single failing call form, and the form
yields nil so the enclosing program keeps running.
"""

from __future__ import annotations

from qlisp.runtime_context import RuntimeContext
from qlisp.types.errors import QlispNotCallable, QlispRuntimeError, QlispUnboundSymbol
from qlisp.types.objects import LispObject, ObjType, NIL, is_callable
from qlisp.evaluation.apply import call_function


def evaluate(expr: LispObject, ctx: RuntimeContext) -> LispObject:
    if expr.evaluated:
        return expr

    if expr.type is ObjType.SYMBOL:
        return _evaluate_symbol(expr, ctx)

    if expr.type is ObjType.LIST:
        if expr.is_literal:
            return _evaluate_literal(expr, ctx)
        if not expr.value:
            return expr
        return _evaluate_call(expr, ctx)

    # --- Atoms (number, string, function, ...) return as-is ---
    return expr


def _evaluate_symbol(expr: LispObject, ctx: RuntimeContext) -> LispObject:
    env = ctx.env.find(expr)
    if env is None:
        ctx.report(QlispUnboundSymbol(f'Symbol not found: "{expr.value}"'))
        return NIL
    value = env.vars[expr.value]
    if not value.evaluated:
        # Evaluate once, then cache the result under the same name
        value = evaluate(value, ctx).mark_evaluated()
        env.memoize(expr, value)
    return value


def _evaluate_literal(expr: LispObject, ctx: RuntimeContext) -> LispObject:
    # One level only: nested lists are evaluated as whatever they are
    items = expr.value
    for i, item in enumerate(items):
        items[i] = evaluate(item, ctx)
    return expr.mark_evaluated()


def _evaluate_call(expr: LispObject, ctx: RuntimeContext) -> LispObject:
    callable_ = evaluate(expr.value[0], ctx)
    try:
        if not is_callable(callable_):
            raise QlispNotCallable(f'"{callable_}" is not callable')
        if callable_.type is ObjType.BUILTIN:
            # Builtins receive the whole unevaluated form
            return callable_.value.handler(expr, ctx, evaluate)
        return call_function(callable_, expr, ctx, evaluate)
    except QlispRuntimeError as err:
        ctx.report(err)
        return NIL
