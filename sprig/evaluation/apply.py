"""Application engine for Sprig.

Centralizes lambda application for the evaluator:
- Arguments arrive already evaluated, in the caller's environment.
- Each call runs in a fresh frame pushed onto the closure's captured chain,
  through its own handle, so recursive and repeated calls never share locals.
- When tail calls are enabled, applications in tail position come back as
  TailCall objects and are run by the loop in `run_lambda`.
"""

from sprig import LispValue, EvaluatorFn
from sprig.runtime_context import get_tail_calls
from sprig.types.bind import bind_arguments
from sprig.types.lambda_fn import Lambda
from sprig.types.tail_call import TailCall


def run_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply `fn` to `args` and return its value, resolving any tail calls."""
    trampoline = get_tail_calls()
    while True:
        call_env = fn.env.fork()
        with call_env.scope():
            bind_arguments(fn.formals, args, call_env)
            result = evaluate_fn(fn.body, call_env, trampoline)
        if not isinstance(result, TailCall):
            return result
        fn, args = result.fn, result.args


def apply(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """Apply a Lambda, or defer it as a TailCall when in tail position."""
    if is_tail_call:
        return TailCall(fn, args)
    return run_lambda(fn, args, evaluate_fn)
