"""Special forms that build Function objects: lambda and defun.

    (lambda (a b . rest) body...)
    (defun (name a b . rest) body...)

The whole defining form is kept as the function body; calls evaluate its
elements from index 2 onward. defun keeps the function name in slot 0 of the
parameter list and also binds it in the current scope.
"""

from qlisp import EvaluatorFn
from qlisp import SExpression, LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.errors import QlispArityError, QlispTypeError
from qlisp.types.objects import DOT, is_list, is_symbol, make_function


def _check_definition(form: SExpression, what: str) -> SExpression:
    if len(form) < 3:
        raise QlispArityError(f"{what} should have an argument list and a body")
    params = form[1]
    if not is_list(params):
        raise QlispTypeError(f"{what} argument list should be a list, got {params!r}")
    for p in params:
        if p is not DOT and not is_symbol(p):
            raise QlispTypeError(f"{what} parameters must be symbols, got {p!r}")
    return params


def lambda_form(
    form: SExpression,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    params = _check_definition(form, "lambda")
    return make_function(params, form, anonymous=True)


def defun_form(
    form: SExpression,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    params = _check_definition(form, "defun")
    if not len(params) or params[0] is DOT:
        raise QlispTypeError("defun argument list should start with the function name")
    fn = make_function(params, form, anonymous=False)
    ctx.env.define(params[0], fn)
    return fn
