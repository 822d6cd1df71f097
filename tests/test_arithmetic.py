import math

import pytest

from pairlisp.types.errors import LispDivisionByZero, LispTypeMismatch, LispArityMismatch
from pairlisp.types.nil import Nil
from pairlisp.types.pair import make_list


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 3)", 7),
        ("(- 3 10)", -7),
        ("(* 6 7)", 42),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(/ 0 -5)", 0),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(* 4611686018427387904 4)", 18446744073709551616),
        ("(+ 1.5 2.25)", 3.75),
        ("(- 1.0 0.5)", 0.5),
        ("(* 2.0 -1.5)", -3.0),
        ("(/ 1.0 4.0)", 0.25),
        ("(/ 7.0 2.0)", 3.5),
        ("(abs -3)", 3),
        ("(abs 3)", 3),
        ("(abs 0)", 0),
        ("(abs -2.5)", 2.5),
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(> 1 2)", False),
        ("(> 2.5 1.5)", True),
        ("(< 1.0 1.0)", False),
    ]
)
def test_arithmetic_and_comparison(run, source, expected):
    result = run(source)
    assert type(result) is type(expected)
    assert result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(= 1 1.0)", False),
        ("(= 1.5 1.5)", True),
        ("(= true true)", True),
        ("(= true 1)", False),
        ("(= (quote a) (quote a))", True),
        ("(= (quote a) (quote b))", False),
        ("(= (list 1 2) (list 1 2))", True),
        ("(= (list 1 2) (list 1 3))", False),
        ("(= (list 1 (list 2 3)) (quote (1 (2 3))))", True),
        ("(= (cons 1 2) (cons 1 2))", True),
        ("(= nil (quote ()))", True),
        ("(= nil (list))", True),
        ("(= nil (list nil))", False),
        ("(= car car)", True),
        ("(= car cdr)", False),
    ]
)
def test_structural_equality(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 1.5)",
        "(- 1.5 1)",
        "(* 2 2.0)",
        "(/ 4.0 2)",
        "(< 1 2.0)",
        "(> 1.0 2)",
        "(+ true 1)",
        "(+ 1 false)",
        "(* (list 1) 2)",
        "(- (quote a) 1)",
        "(abs (quote a))",
        "(abs true)",
        "(abs nil)",
    ]
)
def test_numeric_type_mismatch(run, source):
    with pytest.raises(LispTypeMismatch):
        run(source)


def test_integer_division_by_zero(run):
    with pytest.raises(LispDivisionByZero):
        run("(/ 1 0)")
    with pytest.raises(ZeroDivisionError):
        run("(/ 0 0)")


def test_float_division_by_zero(run):
    assert run("(/ 1.0 0.0)") == math.inf
    assert run("(/ -1.0 0.0)") == -math.inf
    assert run("(/ 1.0 -0.0)") == -math.inf
    assert math.isnan(run("(/ 0.0 0.0)"))


@pytest.mark.parametrize("source", ["(+ 1 2 3)", "(- 1)", "(abs 1 2)", "(< 1)", "(= 1 1 1)"])
def test_numeric_arity(run, source):
    with pytest.raises(LispArityMismatch):
        run(source)


# -----------------------------------------------------
# Pair and list primitives
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (list 1 2 3))", 1),
        ("(cdr (list 1 2 3))", make_list([2, 3])),
        ("(cdr (list 1))", Nil),
        ("(car (cons 4 5))", 4),
        ("(cdr (cons 4 5))", 5),
        ("(cadr (list 1 2 3 4))", 2),
        ("(caddr (list 1 2 3 4))", 3),
        ("(cadddr (list 1 2 3 4))", 4),
        ("(list)", Nil),
        ("(list 3 4 5)", make_list([3, 4, 5])),
        ("(list (list))", make_list([Nil])),
        ("(append nil 3)", make_list([3])),
        ("(append (list 3 4) 5)", make_list([3, 4, 5])),
        ("(append (list 1) (list 2 3))", make_list([1, make_list([2, 3])])),
        ("(append (append nil 1) 2)", make_list([1, 2])),
    ]
)
def test_list_primitives(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(car nil)",
        "(cdr nil)",
        "(car 5)",
        "(cdr (quote a))",
        "(cadr (list 1))",
        "(cadddr (list 1 2 3))",
        "(append 5 1)",
        "(append (cons 1 2) 3)",
    ]
)
def test_list_type_mismatch(run, source):
    with pytest.raises(LispTypeMismatch):
        run(source)


def test_primitive_table_entries():
    from pairlisp.builtin.env_builtin import PRIMITIVES

    names = [name for name, _, _ in PRIMITIVES]
    assert len(names) == len(set(names))
    for name, fn, arity in PRIMITIVES:
        assert callable(fn), name
        assert arity is None or isinstance(arity, int), name
