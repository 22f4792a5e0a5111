from __future__ import annotations
import logging
from pathlib import Path
from typing import Literal, Optional, TextIO, Union

from qlisp import LispValue
from qlisp.builtin.env_builtin import register
from qlisp.evaluation.evaluator import evaluate
from qlisp.modules.file_loader import load_file, load_prelude
from qlisp.reader.parser import Cursor, Reader
from qlisp.runtime_context import RuntimeContext
from qlisp.types.environment import Environment
from qlisp.types.objects import LispObject, NIL

log = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating qlisp code.
    Keeps one RuntimeContext (global scope, call depth) across calls.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        max_call_depth: Optional[int] = None,
        out: Optional[TextIO] = None,
    ):
        self.ctx = RuntimeContext(max_call_depth=max_call_depth, out=out)
        register(self.ctx.global_env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval(prelude, file_name='<prelude>')

    @property
    def env(self) -> Environment:
        return self.ctx.env

    @property
    def global_env(self) -> Environment:
        return self.ctx.global_env

    def evaluate(self, expr: LispObject) -> LispValue:
        """Evaluate one top-level expression."""
        try:
            return evaluate(expr, self.ctx)
        except RecursionError:
            # Builtin-form nesting is not bounded by the call-depth counter
            self.ctx.report("maximum evaluation depth exceeded")
            return NIL

    def eval(self, code: str, file_name: str = '<input>') -> LispValue:
        """Read and evaluate every expression in `code`, one at a time.

        Returns the value of the last expression (nil for blank input).
        QlispSyntaxError propagates; expressions before the error have run.
        """
        log.debug("evaluating %s", file_name)
        cursor = Cursor(code, file_name)
        self.ctx.cursor = cursor
        result: LispValue = NIL
        try:
            for expr in Reader(cursor).read_all():
                result = self.evaluate(expr)
        finally:
            self.ctx.cursor = None
        return result

    def eval_line(self, line: str) -> LispValue:
        """Interactive mode: read a single expression from `line` and evaluate it."""
        cursor = Cursor(line, '<interp>')
        self.ctx.cursor = cursor
        try:
            expr = Reader(cursor).read_expression()
        finally:
            self.ctx.cursor = None
        return self.evaluate(expr)

    def load_file(self, path: Union[str, Path]) -> bool:
        return load_file(self, path)
