from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.environment import Environment
from sprig.types.nil import Nil


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (begin form...)
    Evaluates the forms in a new frame and yields the last value (Nil when empty).
    """
    result: LispValue = Nil
    with env.scope():
        for e in tail[:-1]:
            evaluate_fn(e, env)
        if tail:
            result = evaluate_fn(tail[-1], env, is_tail_call)
    return result


def module_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (module form...)
    Evaluates every form in the current frame for its side effects.
    """
    for e in tail:
        evaluate_fn(e, env)
    return Nil
