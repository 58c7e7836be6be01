"""Render expressions and values back to Lisk source text."""

from io import StringIO

from lisk import SExpression
from lisk.types.builtin import Builtin
from lisk.types.forms import Begin, Define, If, Quote, Set
from lisk.types.lambda_fn import Lambda
from lisk.types.nil import NilType
from lisk.types.symbol import Symbol


def _write_list(buffer: StringIO, items) -> None:
    buffer.write("(")
    buffer.write(" ".join(to_source(item) for item in items))
    buffer.write(")")


def to_source(expr: SExpression) -> str:
    """Return the canonical textual form of `expr`.

    Atoms and lists re-parse to an equal value; floats use Python's repr, so
    non-finite values print as inf/nan and do not read back as numbers.
    """
    # bool before int: bool is a subclass of int
    if expr is True:
        return "#t"
    if expr is False:
        return "#f"
    if isinstance(expr, NilType):
        return "nil"
    if type(expr) is int:
        return str(expr)
    if type(expr) is float:
        return repr(expr)
    if isinstance(expr, Symbol):
        return str(expr)

    with StringIO() as buffer:
        if isinstance(expr, tuple):
            _write_list(buffer, expr)
        elif isinstance(expr, Lambda):
            buffer.write("(lambda ")
            _write_list(buffer, expr.formals)
            buffer.write(" ")
            buffer.write(to_source(expr.body))
            buffer.write(")")
        elif isinstance(expr, Builtin):
            buffer.write(repr(expr))
        elif isinstance(expr, Begin):
            _write_list(buffer, (Symbol("begin"), *expr.exprs))
        elif isinstance(expr, If):
            parts = [Symbol("if"), expr.predicate, expr.consequent]
            if expr.alternate is not None:
                parts.append(expr.alternate)
            _write_list(buffer, parts)
        elif isinstance(expr, Define):
            _write_list(buffer, (Symbol("define"), expr.symbol, expr.value))
        elif isinstance(expr, Set):
            _write_list(buffer, (Symbol("set!"), expr.symbol, expr.value))
        elif isinstance(expr, Quote):
            _write_list(buffer, (Symbol("quote"), expr.expr))
        else:
            buffer.write(str(expr))
        return buffer.getvalue()
