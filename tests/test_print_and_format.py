import pytest

from lisk.builtins import register
from lisk.printer import to_source
from lisk.reader.parser import parse_program
from lisk.types import Begin, Define, If, Lambda, Nil, Quote, Set, Symbol
from lisk.types.environment import Environment


@pytest.mark.parametrize(
    "expr,expected",
    [
        (Nil, "nil"),
        (True, "#t"),
        (False, "#f"),
        (1, "1"),
        (-45, "-45"),
        (1.0, "1.0"),
        (2.5, "2.5"),
        (float("inf"), "inf"),
        (Symbol("set!"), "set!"),
        ((), "()"),
        ((Symbol("+"), 1, (2.0, Nil)), "(+ 1 (2.0 nil))"),
        (Lambda((Symbol("x"), Symbol("y")), (Symbol("+"), Symbol("x"), Symbol("y"))), "(lambda (x y) (+ x y))"),
        (Lambda((), 1), "(lambda () 1)"),
        (Begin((1, 2)), "(begin 1 2)"),
        (If(True, 1), "(if #t 1)"),
        (If(Symbol("p"), 1, 2), "(if p 1 2)"),
        (Define(Symbol("x"), 1), "(define x 1)"),
        (Set(Symbol("x"), (Symbol("f"),)), "(set! x (f))"),
        (Quote((Symbol("a"),)), "(quote (a))"),
    ]
)
def test_to_source(expr, expected):
    assert to_source(expr) == expected


def test_builtin_to_source():
    env = Environment()
    register(env)
    assert to_source(env.lookup(Symbol("<="))) == "#<builtin <=>"


def test_lambda_str_is_its_source():
    lam = parse_program("(lambda (n) (if (<= n 1) 1 n))")
    assert str(lam) == "(lambda (n) (if (<= n 1) 1 n))"


@pytest.mark.parametrize(
    "source",
    [
        "(begin (define x 1) (set! x 2) x)",
        "(lambda (a b) (if a (quote b) b))",
        "(if #f nil)",
    ]
)
def test_special_forms_roundtrip(source):
    expr = parse_program(source)
    assert to_source(expr) == source
    assert parse_program(to_source(expr)) == expr
