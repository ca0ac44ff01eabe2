from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArgumentError
from sprig.printer import to_lisp
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (lambda (params...) body)
    The body is kept unevaluated; the closure captures a child of the current frame.
    """
    if len(tail) != 2:
        raise SprigArgumentError("lambda requires a parameter list and exactly one body form")

    params, body = tail
    if not isinstance(params, list):
        raise SprigArgumentError(f"invalid arg list for lambda: {to_lisp(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise SprigArgumentError(f"non symbol arg in lambda: {to_lisp(p)}")
    if len(set(params)) != len(params):
        raise SprigArgumentError(f"duplicate parameter in lambda: {to_lisp(params)}")

    return Lambda(list(params), body, env.capture_for_closure())
