# Core type aliases for qlisp's data model.
# Unlike a plain-Python-values representation, every runtime value is a tagged
# LispObject (see qlisp.types.objects) because evaluation state (the Evaluated
# flag) lives on the object itself.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` here to keep this module free of imports.

from typing import Any, Callable

__version__ = "1.0.0"

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one object model)
SExpression = LispValue

# Evaluator function type: (expr, ctx) -> LispValue, handed to builtin handlers
EvaluatorFn = Callable[..., LispValue]
