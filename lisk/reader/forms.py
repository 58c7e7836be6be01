"""Form classifier for the Lisk reader.

Maps keyword Symbols to builders that validate the shape of a freshly read
list and turn it into a structured node. Lists with any other head are left
as plain tuples (calls or data).
"""

from __future__ import annotations

from typing import Callable

from lisk import SExpression
from lisk.errors import LiskParseError
from lisk.types.forms import Begin, Define, If, Quote, Set
from lisk.types.lambda_fn import Lambda
from lisk.types.symbol import Symbol

FormBuilder = Callable[[tuple], SExpression]


def _begin(operands: tuple) -> SExpression:
    if not operands:
        raise LiskParseError("begin requires at least 1 expression")
    return Begin(operands)


def _if(operands: tuple) -> SExpression:
    if len(operands) not in (2, 3):
        raise LiskParseError(
            f"if requires a predicate, a consequent and an optional alternate, got {len(operands)} operand(s)"
        )
    return If(*operands)


def _binding(keyword: str, node: type) -> FormBuilder:
    def build(operands: tuple) -> SExpression:
        if len(operands) != 2:
            raise LiskParseError(f"{keyword} requires exactly 2 arguments: ({keyword} name value)")
        name, value = operands
        if not isinstance(name, Symbol):
            raise LiskParseError(f"{keyword} first argument must be a Symbol, got {name!r}")
        return node(name, value)

    return build


def _quote(operands: tuple) -> SExpression:
    if len(operands) != 1:
        raise LiskParseError(f"quote requires exactly 1 argument, got {len(operands)}")
    return Quote(operands[0])


def _lambda(operands: tuple) -> SExpression:
    if len(operands) != 2:
        raise LiskParseError("lambda requires exactly 2 arguments: (lambda (params...) body)")
    params, body = operands
    if not isinstance(params, tuple) or not all(isinstance(p, Symbol) for p in params):
        raise LiskParseError(f"lambda parameters must be a list of symbols, got {params!r}")
    return Lambda(params, body)


FORM_BUILDERS: dict[Symbol, FormBuilder] = {
    Symbol("begin"): _begin,
    Symbol("if"): _if,
    Symbol("define"): _binding("define", Define),
    Symbol("set!"): _binding("set!", Set),
    Symbol("quote"): _quote,
    Symbol("lambda"): _lambda,
}


def classify(items: tuple) -> SExpression:
    """Turn a list whose head is a special-form keyword into its node."""
    if items and isinstance(items[0], Symbol):
        builder = FORM_BUILDERS.get(items[0])
        if builder is not None:
            return builder(items[1:])
    return items
