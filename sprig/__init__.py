# Core type aliases for Sprig's data model.
# Code (forms) and runtime values share one representation: plain Python types
# (int, float, str, bool, list-for-expressions) plus a handful of small classes
# (Symbol, Nil, Cons, Operation, Lambda).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

# Integers are signed 128-bit; the reader widens literals outside this range
INT_MIN = -(2 ** 127)
INT_MAX = 2 ** 127 - 1
