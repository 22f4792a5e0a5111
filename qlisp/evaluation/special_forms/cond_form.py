"""Special form: cond.

    (cond (test1 result1) (test2 result2) ... (else fallback))

Tests are evaluated in order; the first truthy test selects its result, which
is the only result expression evaluated. A test evaluating to the ELSE
sentinel always matches. No match yields nil.
"""

from qlisp import EvaluatorFn
from qlisp import SExpression, LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.errors import QlispArityError, QlispTypeError
from qlisp.types.objects import NIL, ELSE, is_list, is_truthy


def cond_form(
    form: SExpression,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(form) < 2:
        raise QlispArityError("cond requires at least one condition pair argument")

    for pair in form.value[1:]:
        if not is_list(pair) or len(pair) != 2:
            raise QlispTypeError(f"cond clauses must be (test result) pairs, got {pair!r}")
        test = evaluate_fn(pair[0], ctx)
        if test is ELSE or is_truthy(test):
            return evaluate_fn(pair[1], ctx)
    return NIL
