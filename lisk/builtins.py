"""Built-in procedures for the Lisk runtime environment.

Arithmetic and comparison over the two numeric kinds. Operands are combined
pairwise: int with int stays int, anything involving a float is promoted to
float. Integers are signed 64-bit: integral results wrap around on overflow.
"""
from __future__ import annotations

import math
from functools import reduce

from lisk import LispValue
from lisk.errors import LiskArityError, LiskDivideByZero, LiskTypeError
from lisk.printer import to_source
from lisk.types.builtin import Builtin
from lisk.types.environment import Environment
from lisk.types.symbol import Symbol

Number = int | float

INT_MIN = -2**63
INT_MAX = 2**63 - 1


def wrap_int(n: int) -> int:
    """Reduce `n` to the signed 64-bit range, two's complement style."""
    return (n - INT_MIN) % 2**64 + INT_MIN


def _is_number(value: LispValue) -> bool:
    # exact type check: booleans are not numbers
    return type(value) is int or type(value) is float


def _check_numbers(name: str, args: list[LispValue]) -> list[Number]:
    for arg in args:
        if not _is_number(arg):
            raise LiskTypeError(f"{name} received non-numeric argument {to_source(arg)}")
    return args


def _to_float(n: Number) -> float:
    try:
        return float(n)
    except OverflowError:
        raise LiskTypeError(f"Integer {n} is too large to promote to floating point") from None


def _both_int(a: Number, b: Number) -> bool:
    return type(a) is int and type(b) is int


# -------------------------------
# Pairwise numeric operations
# -------------------------------
def add2(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        return wrap_int(a + b)
    return _to_float(a) + _to_float(b)


def sub2(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        return wrap_int(a - b)
    return _to_float(a) - _to_float(b)


def mul2(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        return wrap_int(a * b)
    return _to_float(a) * _to_float(b)


def div2(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        if b == 0:
            raise LiskDivideByZero(f"Integral division of {a} by zero")
        # truncate toward zero
        quotient = abs(a) // abs(b)
        return wrap_int(quotient if (a < 0) == (b < 0) else -quotient)
    a, b = _to_float(a), _to_float(b)
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def le2(a: Number, b: Number) -> bool:
    if _both_int(a, b):
        return a <= b
    return _to_float(a) <= _to_float(b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> Number:
    return reduce(add2, _check_numbers("+", args), 0)


def mul(env: Environment, args: list[LispValue]) -> Number:
    return reduce(mul2, _check_numbers("*", args), 1)


def sub(env: Environment, args: list[LispValue]) -> Number:
    args = _check_numbers("-", args)
    if not args:
        return 0
    if len(args) == 1:
        return wrap_int(-args[0]) if type(args[0]) is int else -args[0]
    return reduce(sub2, args[1:], args[0])


def div(env: Environment, args: list[LispValue]) -> Number:
    args = _check_numbers("/", args)
    if not args:
        return 1
    if len(args) == 1:
        return div2(1, args[0])
    return reduce(div2, args[1:], args[0])


# -------------------------------
# Comparison
# -------------------------------
def lte(env: Environment, args: list[LispValue]) -> bool:
    if len(args) < 2:
        raise LiskArityError(f"<= requires at least 2 arguments, got {len(args)}")
    args = _check_numbers("<=", args)
    return all(le2(a, b) for a, b in zip(args, args[1:]))


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    '+': add,
    '*': mul,
    '-': sub,
    '/': div,
    '<=': lte,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
