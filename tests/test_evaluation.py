import pytest

from qlisp.evaluation.evaluator import evaluate
from qlisp.printer import to_string
from qlisp.reader.parser import parse_one
from qlisp.types.objects import ObjType, NIL, TRUE, FALSE, make_number, make_string

# -----------------------------------------------------
# Self-evaluating objects and symbols
# -----------------------------------------------------

def test_self_evaluating_literals(interp):
    for obj in (make_number(1), make_string("hello"), NIL, TRUE, FALSE):
        assert evaluate(obj, interp.ctx) is obj


def test_empty_list_evaluates_to_itself(interp):
    empty = parse_one("()")
    assert evaluate(empty, interp.ctx) is empty


def test_constants_are_bound(interp):
    assert interp.eval("nil") is NIL
    assert interp.eval("true") is TRUE
    assert interp.eval("false") is FALSE


def test_unbound_symbol_reports_and_yields_nil(interp, diagnostics):
    assert interp.eval("undefined") is NIL
    assert diagnostics() == ['Symbol not found: "undefined"']


def test_execution_continues_after_recoverable_error(interp, diagnostics, capsys):
    result = interp.eval('(print missing "x") (+ 1 2)')
    assert result.value == 3
    assert capsys.readouterr().out == "nilx\n"
    assert len(diagnostics()) == 1


def test_not_callable_reports_and_yields_nil(interp, diagnostics):
    assert interp.eval("(1 2 3)") is NIL
    assert diagnostics() == ['"1" is not callable']


def test_operator_position_is_evaluated(interp):
    interp.eval("(setq plus +)")
    assert interp.eval("(plus 2 3)").value == 5
    assert interp.eval("((lambda (x) (* x x)) 7)").value == 49


# -----------------------------------------------------
# EVALUATED flag and memoization
# -----------------------------------------------------

def test_evaluating_evaluated_object_is_identity(interp):
    lit = parse_one("'(1 2)")
    first = evaluate(lit, interp.ctx)
    assert first is lit and first.evaluated
    for _ in range(3):
        assert evaluate(first, interp.ctx) is first


def test_symbol_value_is_memoized(interp, capsys):
    # Bind an unevaluated expression directly; the first lookup runs it
    interp.global_env.define("x", parse_one('(print "fired")'))
    assert interp.eval("x") is NIL
    assert interp.eval("x") is NIL
    assert interp.eval("(print x x)") is NIL
    assert capsys.readouterr().out == "fired\nnilnil\n"


def test_memoized_value_replaces_binding(interp):
    interp.global_env.define("y", parse_one("(+ 40 2)"))
    value = interp.eval("y")
    assert value.value == 42 and value.evaluated
    assert interp.global_env.vars["y"] is value


def test_list_literal_is_evaluated_in_place_once(interp, capsys):
    interp.eval("(setq xs '((print \"a\") (+ 1 2)))")
    assert capsys.readouterr().out == "a\n"
    xs = interp.eval("xs")
    assert to_string(xs) == "(nil 3)"
    assert interp.eval("xs") is xs
    assert capsys.readouterr().out == ""


def test_literal_in_function_body_is_evaluated_once(interp):
    interp.eval("(defun (wrap n) '(n))")
    assert to_string(interp.eval("(wrap 1)")) == "(1)"
    # The literal was mutated in place on the first call
    assert to_string(interp.eval("(wrap 2)")) == "(1)"


def test_plain_list_inside_literal_is_a_call(interp):
    lit = interp.eval("'(1 (car '(5 6)))")
    assert to_string(lit) == "(1 5)"


# -----------------------------------------------------
# Scoping
# -----------------------------------------------------

def test_setq_inside_call_is_not_visible_after_return(interp, diagnostics):
    interp.eval("(defun (h) (setq inner 1) inner)")
    assert interp.eval("(h)").value == 1
    assert interp.eval("inner") is NIL
    assert diagnostics() == ['Symbol not found: "inner"']


def test_caller_binding_is_visible_in_callee(interp):
    interp.eval("(setq outer 5)")
    interp.eval("(defun (k) outer)")
    assert interp.eval("(k)").value == 5


def test_free_variables_resolve_against_caller_scope(interp):
    interp.eval("(setq y 10)")
    interp.eval("(setq f (lambda () y))")
    interp.eval("(defun (g y) (f))")
    assert interp.eval("(g 42)").value == 42
    assert interp.eval("(f)").value == 10


def test_arguments_evaluate_in_caller_scope(interp):
    interp.eval("(defun (second a b) b)")
    interp.eval("(setq a 100)")
    assert interp.eval("(second 1 a)").value == 100


def test_scope_is_released_after_call(interp):
    interp.eval("(defun (ident x) x)")
    interp.eval("(ident 3)")
    assert interp.ctx.env is interp.global_env
    assert interp.ctx.call_depth == 0


def test_missing_arguments_bind_nil(interp):
    interp.eval("(defun (two a b) b)")
    assert interp.eval("(two 1)") is NIL


def test_extra_arguments_are_ignored(interp):
    interp.eval("(defun (one a) a)")
    assert interp.eval("(one 1 2 3)").value == 1


def test_body_value_is_last_expression(interp, capsys):
    interp.eval('(defun (seq) (print "one") (print "two") 3)')
    assert interp.eval("(seq)").value == 3
    assert capsys.readouterr().out == "one\ntwo\n"


def test_result_types(interp):
    assert interp.eval("(lambda (x) x)").type is ObjType.FUNCTION
    assert interp.eval("+").type is ObjType.BUILTIN


@pytest.mark.parametrize("source", ["", "   ", "; nothing here"])
def test_blank_input_evaluates_to_nil(interp, source):
    assert interp.eval(source) is NIL
