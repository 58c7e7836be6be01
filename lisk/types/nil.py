from __future__ import annotations


class NilType:
    """The unit value. There is exactly one instance, `Nil`."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"

    # Equal only to Nil; note that Nil is truthy for `if`, only #f is false
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
