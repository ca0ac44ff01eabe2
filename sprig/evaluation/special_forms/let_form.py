from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArgumentError
from sprig.types.bind import check_bindable
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (let ((name init)...) body)
    Bindings are made one after another in a single new frame, so each init
    sees the names bound before it (let* semantics).
    """
    if len(tail) != 2 or not isinstance(tail[0], list):
        raise SprigArgumentError("invalid args for let: expected (let ((name value)...) body)")

    bindings, body = tail
    with env.scope():
        for binding in bindings:
            if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
                raise SprigArgumentError("invalid args for let: each binding must be (name value)")
            name, init = binding
            env.define(name, check_bindable(name, evaluate_fn(init, env)))
        return evaluate_fn(body, env, is_tail_call)
