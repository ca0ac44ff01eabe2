from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArgumentError, SprigValueError
from sprig.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if len(tail) != 3:
        raise SprigArgumentError("if requires a predicate, a then-expression and an else-expression")

    predicate = evaluate_fn(tail[0], env)
    if not isinstance(predicate, bool):
        raise SprigValueError("predicate must evaluate to boolean")

    return evaluate_fn(tail[1] if predicate else tail[2], env, is_tail_call)
