"""Lambda procedure representation and argument binding for Lisk."""

from __future__ import annotations

from lisk import SExpression, LispValue
from lisk.types.environment import Environment
from lisk.types.symbol import Symbol
from lisk.errors import LiskArityError


class Lambda:
    """A first-class lambda with formal parameters and a body.

    No defining environment is captured: the body runs in a fresh scope
    chained off the environment of the call site.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: tuple[Symbol, ...], body: SExpression):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: SExpression = body

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash((self.formals, self.body))

    def __str__(self) -> str:
        from lisk.printer import to_source
        return to_source(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue], caller_env: Environment) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters in a
        new scope whose parent is `caller_env`.
        """
        if len(args) != len(self.formals):
            raise LiskArityError(
                f"lambda expects {len(self.formals)} argument(s), got {len(args)}"
            )
        new_env = Environment(outer=caller_env)
        for formal, value in zip(self.formals, args):
            new_env.define(formal, value)
        return new_env
