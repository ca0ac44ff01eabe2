"""Built-in operations: arguments are evaluated before these are called.

Each builtin receives the caller's environment and the list of already
evaluated argument values, mirroring the (env, args) protocol of the
evaluator's dispatch table.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable

from sprig import INT_MAX, INT_MIN, LispValue
from sprig.errors import SprigArgumentError, SprigRuntimeError, SprigValueError
from sprig.printer import to_lisp
from sprig.types.cons import Cons
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.nil import Nil
from sprig.types.operation import Operation


BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]


# -------------------------------
# Numeric helpers
# -------------------------------
def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    return is_int(value) or isinstance(value, float)


def check_int(value: int) -> int:
    """Keep integer results inside the signed 128-bit range."""
    if value < INT_MIN or value > INT_MAX:
        raise SprigRuntimeError("integer overflow")
    return value


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _require_args(name: str, args: list[LispValue], count: int | None = None, at_least: int = 0) -> None:
    if count is not None and len(args) != count:
        raise SprigArgumentError(f"{name} requires exactly {count} argument(s), got {len(args)}")
    if len(args) < at_least:
        raise SprigArgumentError(f"{name} requires at least {at_least} argument(s)")


# -------------------------------
# Arithmetic
# -------------------------------
def _arithmetic(
    name: str,
    int_op: Callable[[int, int], LispValue] | None,
    float_op: Callable[[float, float], float],
) -> BuiltinFn:
    """Build a left-folding arithmetic builtin.

    `int_op` handles Int op Int; when it is None the operands are widened to
    Float first (true division). Any Float operand widens the other.
    """
    def fold(env: Environment, args: list[LispValue]) -> LispValue:
        _require_args(name, args, at_least=1)
        acc = args[0]
        if not is_number(acc):
            raise SprigValueError(f"wrong type for {name}: {to_lisp(acc)}")
        if int_op is None:
            acc = float(acc)
        for elem in args[1:]:
            if not is_number(elem):
                raise SprigValueError(f"wrong type for {name}: {to_lisp(elem)}")
            if int_op is not None and is_int(acc) and is_int(elem):
                acc = check_int(int_op(acc, elem))
            else:
                acc = float_op(float(acc), float(elem))
        return acc

    fold.__name__ = f"builtin_{name}"
    return fold


add = _arithmetic("+", operator.add, operator.add)
sub = _arithmetic("-", operator.sub, operator.sub)
mul = _arithmetic("*", operator.mul, operator.mul)
div = _arithmetic("/", None, _ieee_div)


def exp(env: Environment, args: list[LispValue]) -> float:
    _require_args("exp", args, count=1)
    value = args[0]
    if not is_number(value):
        raise SprigRuntimeError(f"exp on {to_lisp(value)}")
    try:
        return math.exp(float(value))
    except OverflowError:
        return math.inf


def _float_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2:
            return -math.inf
        return math.inf
    except ValueError:
        # Domain errors: negative base with fractional exponent, 0 ** negative
        if base == 0.0:
            return math.inf
        return math.nan


def pow_(env: Environment, args: list[LispValue]) -> LispValue:
    _require_args("pow", args, count=2)
    base, exponent = args
    if not (is_number(base) and is_number(exponent)):
        raise SprigValueError("wrong types for pow")
    if is_int(base) and is_int(exponent) and exponent >= 0:
        if abs(base) > 1 and exponent * math.log2(abs(base)) > 128:
            raise SprigRuntimeError("integer overflow")
        return check_int(base ** exponent)
    return _float_pow(float(base), float(exponent))


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Cons:
    _require_args("cons", args, count=2)
    head, tail = args
    return Cons(head, tail)


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return Cons.from_iterable(args)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _require_args("car", args, count=1)
    pair = args[0]
    if not isinstance(pair, Cons):
        raise SprigRuntimeError(f"car on non cons type {to_lisp(pair)}")
    return pair.head


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _require_args("cdr", args, count=1)
    pair = args[0]
    if not isinstance(pair, Cons):
        raise SprigRuntimeError(f"cdr on non cons type {to_lisp(pair)}")
    return pair.tail


# -------------------------------
# Equality and ordering
# -------------------------------
def values_equal(a: LispValue, b: LispValue) -> bool:
    """Per-kind equality used by `=`.

    Numbers compare across Int/Float, booleans only equal booleans, pairs and
    expressions compare structurally, closures are never equal.
    """
    if isinstance(a, Lambda) or isinstance(b, Lambda):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        if is_int(a) and is_int(b):
            return a == b
        return float(a) == float(b)
    if isinstance(a, Cons) and isinstance(b, Cons):
        return values_equal(a.head, b.head) and values_equal(a.tail, b.tail)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    return a == b


def _orderable(a: LispValue, b: LispValue) -> tuple[Any, Any] | None:
    """Return a comparable pair, or None when the kinds cannot be ordered."""
    if is_number(a) and is_number(b):
        if is_int(a) and is_int(b):
            return a, b
        return float(a), float(b)
    if isinstance(a, str) and isinstance(b, str):
        return a, b
    return None


def _ordering(name: str, relation: Callable[[Any, Any], bool]) -> BuiltinFn:
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _require_args(name, args, at_least=1)
        for left, right in zip(args, args[1:]):
            pair = _orderable(left, right)
            if pair is None or not relation(*pair):
                return False
        return True

    compare.__name__ = f"builtin_{name}"
    return compare


def equals(env: Environment, args: list[LispValue]) -> bool:
    _require_args("=", args, at_least=1)
    return all(values_equal(a, b) for a, b in zip(args, args[1:]))


lt = _ordering("<", operator.lt)
lte = _ordering("<=", operator.le)
gt = _ordering(">", operator.gt)
gte = _ordering(">=", operator.ge)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[Operation, BuiltinFn] = {
    Operation.ADD: add,
    Operation.SUBTRACT: sub,
    Operation.MULTIPLY: mul,
    Operation.DIVIDE: div,
    Operation.EXP: exp,
    Operation.POW: pow_,
    Operation.CONS: cons,
    Operation.LIST: list_builtin,
    Operation.CAR: car,
    Operation.CDR: cdr,
    Operation.EQ: equals,
    Operation.LT: lt,
    Operation.LE: lte,
    Operation.GT: gt,
    Operation.GE: gte,
}
