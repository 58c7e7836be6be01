# Core type aliases for Lisk's data model.
# Atoms are plain Python values (int, float, bool, Symbol, Nil); lists are tuples.
# Special forms produced by the reader are small frozen dataclasses (see lisk.types.forms).
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably in this codebase)
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
