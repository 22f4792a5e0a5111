from qlisp import EvaluatorFn
from qlisp import SExpression, LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.errors import QlispArityError, QlispTypeError
from qlisp.types.objects import NIL, is_symbol


def setq_form(
    form: SExpression,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(setq name value) binds in the current scope and returns nil."""
    args_len = len(form) - 1
    if args_len != 2:
        raise QlispArityError(f"setq takes exactly two arguments, {args_len} were given")
    name, val_expr = form[1], form[2]
    if not is_symbol(name):
        raise QlispTypeError(f"setq first argument must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, ctx)
    ctx.env.define(name, value)
    return NIL
