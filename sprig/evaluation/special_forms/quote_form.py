from sprig import SExpression, LispValue, EvaluatorFn
from sprig.errors import SprigArgumentError


def quote_form(
    tail: list[SExpression], env, evaluate_fn: EvaluatorFn, _: bool
) -> LispValue:
    if len(tail) != 1:
        raise SprigArgumentError("quote expects exactly 1 argument")
    return tail[0]
