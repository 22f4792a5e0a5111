"""Runtime environment (scope) for qlisp.

An Environment maps symbol names to LispObjects and links to the environment
that was active when it was created via `outer`. The root (global) environment
has no outer link, which terminates lookups.

Scoping is dynamic: a call's environment is chained to the caller's current
environment, never to an environment captured at definition time.
"""

from __future__ import annotations

from typing import Optional, Union

from qlisp.types.errors import QlispTypeError, QlispUnboundSymbol
from qlisp.types.objects import LispObject, ObjType

Name = Union[str, LispObject]


def _key(name: Name) -> str:
    if isinstance(name, LispObject):
        if name.type is not ObjType.SYMBOL:
            raise QlispTypeError(f"Cannot bind {name!r}: not a symbol")
        return name.value
    return name


class Environment:
    """Hierarchical mapping from symbol names to LispObjects."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None, bindings: Optional[dict[str, LispObject]] = None):
        self.vars: dict[str, LispObject] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def define(self, name: Name, value: LispObject) -> None:
        """Bind `name` to `value` in this frame, shadowing outer bindings."""
        self.vars[_key(name)] = value

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def memoize(self, name: Name, value: LispObject) -> None:
        """Replace the binding of `name` in the frame that owns it.

        This is the evaluator's only cache: once a bound value has been
        evaluated, the result takes the place of the original binding.
        """
        env = self.find(name)
        if env is None:
            raise QlispUnboundSymbol(f'Symbol not found: "{_key(name)}"')
        env.vars[_key(name)] = value

    def update(self, mapping: dict[str, LispObject]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Name) -> bool:
        return self.find(name) is not None

    def __repr__(self) -> str:
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append("{" + ", ".join(f"{k}: {v!r}" for k, v in env.vars.items()) + "}")
            env = env.outer
        return f"<Environment chain: {' -> '.join(frames)}>"
