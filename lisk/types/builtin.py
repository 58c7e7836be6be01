"""Wrapper for host-level procedures exposed to Lisk programs."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from lisk import LispValue

if TYPE_CHECKING:
    from lisk.types.environment import Environment

Procedure = Callable[["Environment", list[LispValue]], LispValue]


class Builtin:
    """A first-class builtin procedure.

    The wrapped callable receives the calling environment and the list of
    already-evaluated argument values.
    """

    __slots__ = ("name", "procedure")

    def __init__(self, name: str, procedure: Procedure):
        self.name = name
        self.procedure = procedure

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.procedure(env, args)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Builtin)
            and self.name == other.name
            and self.procedure is other.procedure
        )

    def __hash__(self) -> int:
        return hash((self.name, id(self.procedure)))

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"
