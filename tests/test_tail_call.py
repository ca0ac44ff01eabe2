import pytest

from sprig import runtime_context
from sprig.interpreter import Interpreter

COUNTDOWN = "(define loop (lambda (n acc) (if (= n 0) acc (loop (- n 1) (+ acc 1)))))"


@pytest.fixture
def trampoline(monkeypatch):
    monkeypatch.setattr(runtime_context, "_tail_calls", True)


@pytest.fixture
def recursive(monkeypatch):
    monkeypatch.setattr(runtime_context, "_tail_calls", False)


def test_deep_tail_recursion_runs_with_trampoline(trampoline):
    """With tail calls enabled, (loop 20000 0) runs in constant Python stack."""
    interp = Interpreter()
    interp.eval(COUNTDOWN)
    assert interp.eval("(loop 20000 0)") == 20000


@pytest.mark.parametrize(
    "definition",
    [
        # tail call from a cond branch
        "(define loop (lambda (n acc) (cond ((= n 0) acc) (#t (loop (- n 1) (+ acc 1))))))",
        # tail call as the last form of begin
        "(define loop (lambda (n acc) (if (= n 0) acc (begin (define m (- n 1)) (loop m (+ acc 1))))))",
        # tail call as a let body
        "(define loop (lambda (n acc) (if (= n 0) acc (let ((m (- n 1))) (loop m (+ acc 1))))))",
    ]
)
def test_every_tail_position_is_trampolined(trampoline, definition):
    interp = Interpreter()
    interp.eval(definition)
    assert interp.eval("(loop 20000 0)") == 20000
    assert interp.env.depth == 0


def test_mutual_recursion_with_trampoline(trampoline):
    interp = Interpreter()
    interp.eval("(define even? (lambda (n) (if (= n 0) #t (odd? (- n 1)))))")
    interp.eval("(define odd? (lambda (n) (if (= n 0) #f (even? (- n 1)))))")
    assert interp.eval("(even? 10001)") is False
    assert interp.eval("(odd? 10001)") is True


def test_deep_recursion_exhausts_the_stack_without_trampoline(recursive):
    interp = Interpreter()
    interp.eval(COUNTDOWN)
    with pytest.raises(RecursionError):
        interp.eval("(loop 20000 0)")
    assert interp.env.depth == 0


def test_non_tail_calls_still_recurse(trampoline):
    interp = Interpreter()
    interp.eval("(define count (lambda (n) (if (= n 0) 0 (+ 1 (count (- n 1))))))")
    assert interp.eval("(count 50)") == 50


def test_closure_state_survives_trampolined_calls(trampoline):
    interp = Interpreter()
    interp.eval("(define total 0)")
    interp.eval("(define add-all (lambda (n) (if (= n 0) total (begin (set! total (+ total n)) (add-all (- n 1))))))")
    assert interp.eval("(add-all 100)") == 5050
