import pytest

from sprig import runtime_context
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import TokenStream, lex
from sprig.types.environment import Environment

# Every test module runs twice:
# 1) with plain recursive application (the default) ["recursive"]
# 2) with the tail-call trampoline switched on ["trampoline"]
# The switch is process-global, so it is flipped once per module and restored
# afterwards. Module scope keeps hypothesis tests free of function-scoped fixtures.


@pytest.fixture(params=["recursive", "trampoline"], scope="module", autouse=True)
def evaluation_mode(request):
    previous = runtime_context.get_tail_calls()
    runtime_context.set_tail_calls(request.param == "trampoline")
    yield request.param
    runtime_context.set_tail_calls(previous)


@pytest.fixture
def env():
    """Fresh environment: one empty root frame."""
    return Environment()


def run_source(source, env):
    """Evaluate every form in `source` in `env`, returning the last value."""
    result = None
    for expr in TokenStream(lex(source)).parse_all():
        result = evaluate(expr, env)
    return result


@pytest.fixture
def run(env):
    return lambda source: run_source(source, env)
