"""Registry of special forms for the qlisp evaluator.

Maps names to handlers that control the evaluation of their own operands
(short-circuiting, unevaluated names, deferred bodies). They are installed in
the global environment as Builtin objects alongside the ordinary builtins.
"""

from qlisp.evaluation.special_forms.set_form import setq_form
from qlisp.evaluation.special_forms.lambda_form import lambda_form, defun_form
from qlisp.evaluation.special_forms.if_form import if_form
from qlisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    "setq": setq_form,
    "defun": defun_form,
    "lambda": lambda_form,
    "if": if_form,
    "cond": cond_form,
}
