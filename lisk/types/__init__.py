from lisk.types.symbol import Symbol
from lisk.types.nil import Nil, NilType
from lisk.types.environment import Environment
from lisk.types.lambda_fn import Lambda
from lisk.types.builtin import Builtin
from lisk.types.forms import Begin, If, Define, Set, Quote

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Environment",
    "Lambda",
    "Builtin",
    "Begin",
    "If",
    "Define",
    "Set",
    "Quote",
]
