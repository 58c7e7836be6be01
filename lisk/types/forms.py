"""Structured special-form nodes built by the reader.

Each node is an immutable dataclass; the evaluator dispatches on the node
class (see lisk.evaluation.special_forms).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lisk import SExpression
from lisk.types.symbol import Symbol


@dataclass(frozen=True)
class Begin:
    exprs: tuple[SExpression, ...]


@dataclass(frozen=True)
class If:
    predicate: SExpression
    consequent: SExpression
    # None when the form was written without an alternate
    alternate: Optional[SExpression] = None


@dataclass(frozen=True)
class Define:
    symbol: Symbol
    value: SExpression


@dataclass(frozen=True)
class Set:
    symbol: Symbol
    value: SExpression


@dataclass(frozen=True)
class Quote:
    expr: SExpression
