"""Core evaluator for the Sprig interpreter.

Walks the syntax tree directly. The evaluated head of an expression decides
what happens to the rest: special forms receive their argument forms raw,
built-ins and lambdas receive them evaluated left to right.
"""

from __future__ import annotations

from sprig import SExpression, LispValue
from sprig.builtins import BUILTINS
from sprig.errors import SprigSyntaxError
from sprig.evaluation.apply import apply, run_lambda
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.runtime_context import get_tail_calls
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.operation import Operation
from sprig.types.symbol import Symbol
from sprig.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, mutating `env` in place.

    Raises a SprigError subclass on the first failure.
    """
    result = evaluate0(expr, env, get_tail_calls())
    if isinstance(result, TailCall):
        return run_lambda(result.fn, result.args, evaluate0)
    return result


def evaluate0(
    expr: SExpression,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """
    Single-step evaluation. Returns a value, or a TailCall when `is_tail_call`
    is set and the expression is a lambda application.
    """
    match expr:
        case Symbol():
            return env.find(expr)

        case [head, *tail_args]:
            fn = evaluate0(head, env)

            if isinstance(fn, Operation):
                special_form = SPECIAL_FORMS.get(fn)
                if special_form is not None:
                    return special_form(tail_args, env, evaluate0, is_tail_call)
                args = [evaluate0(arg, env) for arg in tail_args]
                return BUILTINS[fn](env, args)

            if isinstance(fn, Lambda):
                args = [evaluate0(arg, env) for arg in tail_args]
                return apply(fn, args, evaluate0, is_tail_call)

            raise SprigSyntaxError(fn)

        case []:
            raise SprigSyntaxError(expr)

    # --- Atoms, pairs, closures and operations evaluate to themselves ---
    return expr
