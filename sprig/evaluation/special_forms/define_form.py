from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArgumentError
from sprig.types.bind import check_bindable
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame; tail-call awareness is irrelevant since define yields Nil.
    """
    if not tail or not isinstance(tail[0], Symbol):
        raise SprigArgumentError("first argument to define has to be symbol")
    if len(tail) != 2:
        raise SprigArgumentError("define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.define(name, check_bindable(name, value))
    return Nil
