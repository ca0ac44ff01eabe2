from __future__ import annotations

from sprig import LispValue
from sprig.errors import SprigArgumentError, SprigValueError
from sprig.types.environment import Environment
from sprig.types.operation import Operation
from sprig.types.symbol import Symbol


def check_bindable(name: Symbol, value: LispValue) -> LispValue:
    """Reject values that may not live in an environment.

    Operations are reserved words resolved by the reader, never variables.
    """
    if isinstance(value, Operation):
        raise SprigValueError(f"cannot bind built-in operation {value} to {name}")
    return value


def bind_arguments(
    formals: list[Symbol],
    supplied_args: list[LispValue],
    env: Environment,
) -> None:
    """
    Single source of truth for parameter binding in Sprig.

    Defines each formal in the current frame of `env`, positionally. The
    number of supplied arguments must equal the number of formals.
    """
    if len(supplied_args) != len(formals):
        params = " ".join(str(f) for f in formals)
        raise SprigArgumentError(
            f"expected {len(formals)} argument(s) for ({params}), got {len(supplied_args)}"
        )
    for name, value in zip(formals, supplied_args):
        env.define(name, check_bindable(name, value))
