"""Explicit execution state for one interpreter instance.

Everything the evaluator mutates while running (current scope, call depth,
reader cursor) lives on a RuntimeContext that is passed down explicitly, so
several interpreters can coexist in one process.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO, TYPE_CHECKING

from qlisp.config import get_max_call_depth, get_recursion_limit
from qlisp.types.environment import Environment
from qlisp.types.errors import QlispCallDepthError, QlispError
from qlisp.types.objects import LispObject

if TYPE_CHECKING:
    from qlisp.reader.parser import Cursor

log = logging.getLogger(__name__)
diagnostics = logging.getLogger("qlisp.diagnostics")


class RuntimeContext:
    def __init__(
        self,
        max_call_depth: Optional[int] = None,
        out: Optional[TextIO] = None,
        recursion_limit: Optional[int] = None,
    ):
        self.global_env: Environment = Environment()
        self.env: Environment = self.global_env
        self.call_depth: int = 0
        self.max_call_depth: int = max_call_depth if max_call_depth is not None else get_max_call_depth()
        self.cursor: Optional[Cursor] = None
        self._out = out

        # Each nested user call costs several host frames
        limit = recursion_limit if recursion_limit is not None else get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

    @property
    def out(self) -> TextIO:
        # Resolved lazily so that redirected stdout (e.g. under pytest) is honoured
        return self._out if self._out is not None else sys.stdout

    def write(self, text: str) -> None:
        self.out.write(text)

    def check_call_depth(self) -> None:
        if self.call_depth >= self.max_call_depth:
            raise QlispCallDepthError("max call stack size reached")

    @contextmanager
    def enter_scope(self, bindings: dict[str, LispObject]) -> Iterator[Environment]:
        """Push a call scope chained to the current environment.

        The scope and the call-depth counter are restored on every exit path.
        """
        previous = self.env
        self.env = Environment(outer=previous, bindings=bindings)
        self.call_depth += 1
        log.debug("enter scope depth=%d", self.call_depth)
        try:
            yield self.env
        finally:
            self.env = previous
            self.call_depth -= 1
            log.debug("exit scope depth=%d", self.call_depth)

    def report(self, error: QlispError | str) -> None:
        """Report a recoverable diagnostic; evaluation continues."""
        diagnostics.error("%s", error)
