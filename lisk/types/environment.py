"""Runtime environment for Lisk.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Children hold a plain reference to their
parent; several call scopes may share one parent at the same time.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lisk import LispValue
from lisk.errors import LiskInvalidSymbol, LiskUnboundSymbol
from lisk.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Runtime environment stores evaluated LispValue(s)
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope only.

        An existing binding in this scope is overwritten; a binding of the same
        name in an outer scope is shadowed, not changed.

        Raises LiskInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LiskInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises LiskUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise LiskUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost scope first.

        Raises LiskUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise LiskUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            if not isinstance(k, Symbol):
                raise LiskInvalidSymbol(f"Cannot define {k} as a symbol")
            self.vars[k] = v

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
