import logging

import pytest

from qlisp.interpreter import Interpreter


# Most tests run without the prelude so that only the core builtins are bound.
@pytest.fixture
def interp():
    return Interpreter(prelude=None)


@pytest.fixture
def diagnostics(caplog):
    """Return a callable yielding the recoverable-error messages reported so far."""
    caplog.set_level(logging.ERROR, logger="qlisp.diagnostics")

    def messages():
        return [r.getMessage() for r in caplog.records if r.name == "qlisp.diagnostics"]

    return messages
