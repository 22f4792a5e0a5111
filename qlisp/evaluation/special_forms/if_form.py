from qlisp import EvaluatorFn
from qlisp import SExpression, LispValue
from qlisp.runtime_context import RuntimeContext
from qlisp.types.errors import QlispArityError
from qlisp.types.objects import is_truthy


def if_form(
    form: SExpression,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(form) != 4:
        raise QlispArityError(
            "if takes exactly 3 arguments: condition, then, and else blocks. "
            f"The function was given {len(form) - 1} arguments instead"
        )

    # Only the selected branch is evaluated
    if is_truthy(evaluate_fn(form[1], ctx)):
        return evaluate_fn(form[2], ctx)
    return evaluate_fn(form[3], ctx)
