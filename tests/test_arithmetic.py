import pytest

from qlisp.builtin import operations
from qlisp.types.errors import QlispTypeError, QlispZeroDivisionError
from qlisp.types.objects import NIL, TRUE, FALSE, make_number, make_string


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 3 10)", -7),
        ("(* 2 3)", 6),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ (- 0 7) 2)", -3),
        ("(** 2 10)", 1024),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 (* 2 (+ 3 4)) (- 10 6))", 19),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.eval(source).value == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", TRUE),
        ("(= 1 2)", FALSE),
        ('(= "a" "a")', TRUE),
        ('(= "a" 1)', FALSE),
        ("(> 2 1)", TRUE),
        ("(> 1 2)", FALSE),
        ("(< 1 2)", TRUE),
        ('(< "abc" "abd")', TRUE),
        ("(= nil nil)", TRUE),
        ("(= true false)", FALSE),
    ]
)
def test_comparisons(interp, source, expected):
    assert interp.eval(source) is expected


def test_string_concatenation(interp):
    assert interp.eval('(+ "foo" "bar" "baz")').value == "foobarbaz"


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1)", "can't have less than two arguments"),
        ("(+)", "can't have less than two arguments"),
        ("(- 1)", "can't have less than two arguments"),
        ("(* 2 3 4)", "* takes exactly 2 operands, 3 was given"),
        ("(/ 1)", "/ takes exactly 2 operands, 1 was given"),
        ("(** 2)", "** takes exactly 2 operands"),
        ("(= 1 1 1)", "= takes exactly 2 operands"),
        ("(> 1)", "> takes exactly 2 operands"),
        ("(< 1 2 3)", "< takes exactly 2 operands"),
        ("(/ 1 0)", "Division by zero"),
        ('(+ 1 "a")', "+ is not defined"),
        ("(> 1 nil)", "> is not defined"),
        ("(** 2 (- 0 1))", "non-negative integer exponent"),
    ]
)
def test_arithmetic_errors_yield_nil(interp, diagnostics, source, message):
    assert interp.eval(source) is NIL
    assert message in diagnostics()[-1]


def test_arity_error_skips_operand_evaluation(interp, capsys):
    assert interp.eval('(* (print "x") 2 3)') is NIL
    assert capsys.readouterr().out == ""


def test_operands_evaluated_left_to_right(interp, capsys):
    interp.eval('(= (print "l") (print "r"))')
    assert capsys.readouterr().out == "l\nr\n"


def test_operations_directly():
    assert operations.add(make_number(2), make_number(3)).value == 5
    assert operations.divide(make_number(-9), make_number(4)).value == -2
    assert operations.power(make_number(3), make_number(0)).value == 1
    assert operations.equals(make_string("x"), make_string("x")) is TRUE
    with pytest.raises(QlispZeroDivisionError):
        operations.divide(make_number(1), make_number(0))
    with pytest.raises(QlispTypeError):
        operations.multiply(make_string("a"), make_number(2))
