import pytest

from qlisp.printer import to_string
from qlisp.types.objects import NIL


@pytest.fixture
def itp(interp):
    interp.eval("(defun (rest-of a . rest) rest)")
    interp.eval("(defun (first-of a . rest) a)")
    return interp


def test_rest_collects_remaining_arguments(itp):
    assert itp.eval("(first-of 1 2 3)").value == 1
    rest = itp.eval("(rest-of 1 2 3)")
    assert to_string(rest) == "(2 3)"
    assert rest.evaluated


def test_rest_arguments_are_evaluated_in_caller_scope(itp):
    itp.eval("(setq v 7)")
    assert to_string(itp.eval("(rest-of 0 v (+ v 1))")) == "(7 8)"


def test_rest_is_empty_without_extra_arguments(itp):
    assert to_string(itp.eval("(rest-of 1)")) == "()"


def test_caller_dot_splices_list(itp):
    assert to_string(itp.eval("(rest-of 1 . '(2 3))")) == "(2 3)"
    assert itp.eval("(first-of 1 . '(2 3))").value == 1


def test_caller_dot_with_symbol(itp):
    itp.eval("(setq xs '(2 3))")
    assert to_string(itp.eval("(rest-of 1 . xs)")) == "(2 3)"


def test_caller_dot_after_extra_arguments(itp):
    assert to_string(itp.eval("(rest-of 1 2 . '(3 4))")) == "(2 3 4)"


def test_caller_dot_with_plain_list_matches_positional_call(itp):
    assert to_string(itp.eval("(rest-of 1 . (2 3))")) == "(2 3)"
    assert itp.eval("(first-of 1 . (2 3))").value == 1
    itp.eval("(setq v 5)")
    assert to_string(itp.eval("(rest-of 0 . (v (+ v 1)))")) == "(5 6)"


def test_splice_from_function_result(itp):
    itp.eval("(setq ys (rest-of 1 2 3))")
    assert to_string(itp.eval("(rest-of 0 . ys)")) == "(2 3)"


def test_caller_dot_evaluates_call_forms(itp):
    assert to_string(itp.eval("(rest-of 0 . (cdr '(1 2 3)))")) == "(2 3)"
    assert to_string(itp.eval("(rest-of 0 . (rest-of 1 2 3))")) == "(2 3)"
    assert to_string(itp.eval("(rest-of 0 . ((lambda (. xs) xs) 2 3))")) == "(2 3)"


def test_lambda_variadic(interp):
    assert to_string(interp.eval("((lambda (a . rest) rest) 1 2 3)")) == "(2 3)"
    assert to_string(interp.eval("((lambda (. all) all) 1 2)")) == "(1 2)"


def test_misplaced_dot_in_definition(interp, diagnostics):
    interp.eval("(defun (bad . a b) a)")
    assert interp.eval("(bad 1 2)") is NIL
    assert "incorrectly placed" in diagnostics()[0]


def test_misplaced_dot_at_call_site(itp, diagnostics):
    assert itp.eval("(rest-of 1 . '(2) 3)") is NIL
    assert "dot notation on the caller side" in diagnostics()[0]


def test_caller_dot_requires_list(itp, diagnostics):
    assert itp.eval("(rest-of 1 . 5)") is NIL
    assert "should always be followed by a list" in diagnostics()[0]
