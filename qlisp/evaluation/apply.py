"""Function-call protocol for user-defined functions.

Binding rules, left to right over the declared parameters:
- a plain parameter takes the evaluated argument at the same position, or nil
  when the caller supplied fewer arguments;
- the DOT sentinel, which must be second-to-last, collects every remaining
  argument into a fresh list bound to the final parameter name. A caller may
  itself end its arguments with `. list-expr`; the elements of that list are
  spliced in instead of the list being passed as one argument. A plain
  parenthesized list whose operator position does not name a function, such
  as `. (2 3)`, reads as a dotted list instead: its elements are argument
  expressions evaluated like any other.

Arguments are evaluated in the caller's environment before the call scope is
entered. The body is evaluated in a scope chained to the caller's current
environment (dynamic scoping); functions capture nothing at definition time.
"""

from __future__ import annotations

from qlisp import EvaluatorFn
from qlisp.runtime_context import RuntimeContext
from qlisp.types.errors import QlispArgumentError
from qlisp.types.objects import (
    LispObject,
    NIL,
    DOT,
    is_callable,
    is_list,
    is_symbol,
    make_list,
    function_name,
)


def bind_arguments(
    fn: LispObject,
    call_expr: LispObject,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> dict[str, LispObject]:
    """Evaluate the call's arguments and return the new scope's bindings."""
    params = fn.value.params.value
    # Named functions keep their own name in slot 0 of the parameter list
    declared = params if fn.is_lambda else params[1:]
    provided = call_expr.value[1:]

    bindings: dict[str, LispObject] = {}
    for i, param in enumerate(declared):
        if param is DOT:
            if i != len(declared) - 2:
                raise QlispArgumentError(
                    "apply (.) operator in function definition incorrectly placed. "
                    "It should be at the pre-last position, followed by a vararg "
                    "list argument name"
                )
            rest_name = declared[i + 1]
            bindings[rest_name.value] = collect_variadic(fn, provided[i:], ctx, evaluate_fn)
            break
        if i < len(provided):
            bindings[param.value] = evaluate_fn(provided[i], ctx)
        else:
            bindings[param.value] = NIL
    return bindings


def _is_call_form(expr: LispObject, ctx: RuntimeContext) -> bool:
    """True when the operator position of `expr` names something callable."""
    if not expr.value:
        return False
    head = expr.value[0]
    if is_list(head):
        return True
    if is_symbol(head):
        env = ctx.env.find(head)
        return env is not None and is_callable(env.vars[head.value])
    return is_callable(head)


def collect_variadic(
    fn: LispObject,
    rest: list[LispObject],
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispObject:
    collected: list[LispObject] = []
    for j, arg in enumerate(rest):
        if arg is DOT:
            if j != len(rest) - 2:
                raise QlispArgumentError(
                    f"Error while calling {function_name(fn)}: dot notation on the caller "
                    "side must be followed by a list argument containing the variadic "
                    "expansion list"
                )
            tail = rest[j + 1]
            if is_list(tail) and not tail.is_literal and not _is_call_form(tail, ctx):
                # `. (2 3)` reads as a dotted list: its elements are the remaining arguments
                collected.extend(evaluate_fn(item, ctx) for item in tail.value)
                break
            expansion = evaluate_fn(tail, ctx)
            if not is_list(expansion):
                raise QlispArgumentError(
                    "dot operator on caller side should always be followed by a list argument"
                )
            collected.extend(expansion.value)
            break
        collected.append(evaluate_fn(arg, ctx))
    return make_list(collected).mark_evaluated()


def call_function(
    fn: LispObject,
    call_expr: LispObject,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispObject:
    """Call a user-defined function with the (unevaluated) call form."""
    ctx.check_call_depth()
    bindings = bind_arguments(fn, call_expr, ctx, evaluate_fn)

    # Body forms start after the form marker and the parameter list
    result = NIL
    with ctx.enter_scope(bindings):
        for body_expr in fn.value.body.value[2:]:
            result = evaluate_fn(body_expr, ctx)
    return result
