from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArgumentError
from sprig.types.bind import check_bindable
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    if not tail or not isinstance(tail[0], Symbol):
        raise SprigArgumentError("first argument to set! has to be symbol")
    if len(tail) != 2:
        raise SprigArgumentError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, check_bindable(var_sym, value))
    return Nil
