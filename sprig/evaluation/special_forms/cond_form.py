from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArgumentError, SprigRuntimeError, SprigValueError
from sprig.types.environment import Environment


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (cond (predicate result)...)
    Clauses are tried in order; only the first true clause's result is evaluated.
    """
    for clause in tail:
        if not isinstance(clause, list) or len(clause) != 2:
            raise SprigArgumentError("invalid argument to cond")
        predicate = evaluate_fn(clause[0], env)
        if not isinstance(predicate, bool):
            raise SprigValueError("predicate must evaluate to boolean")
        if predicate:
            return evaluate_fn(clause[1], env, is_tail_call)
    raise SprigRuntimeError("cond all predicate false")
