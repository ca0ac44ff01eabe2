import pytest

from sprig.errors import FrameUnderflowError, SprigError, SprigVariableNotFound
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


def test_global_frame(env):
    env.define(a, Nil)
    assert env.find(a) is Nil

    env.set(a, True)
    assert env.find(a) is True


def test_multiple_frames(env):
    env.define(a, Nil)
    env.define(b, "b1")

    env.push_frame()
    env.define(a, 2)
    assert env.find(a) == 2

    env.set(b, "b2")
    assert env.find(b) == "b2"

    env.define(c, "c")
    assert env.find(c) == "c"

    env.pop_frame()

    assert env.find(a) is Nil
    assert env.find(b) == "b2"
    with pytest.raises(SprigVariableNotFound):
        env.find(c)


def test_shadowing_is_undone_by_pop(env):
    env.define(a, 1)
    env.push_frame()
    env.define(a, 2)
    assert env.find(a) == 2
    env.pop_frame()
    assert env.find(a) == 1


def test_closure_env_shares_defining_frame(env):
    env.push_frame()
    env.define(a, 1)

    lambda_env = env.capture_for_closure()
    assert lambda_env.find(a) == 1

    lambda_env.set(a, 2)
    assert lambda_env.find(a) == 2
    assert env.find(a) == 2

    env.pop_frame()
    # The captured frame outlives the scope that created it
    assert lambda_env.find(a) == 2
    with pytest.raises(SprigVariableNotFound):
        env.find(a)


def test_closure_define_does_not_leak_into_defining_scope(env):
    lambda_env = env.capture_for_closure()
    lambda_env.define(a, 1)
    assert not env.is_defined(a)
    assert lambda_env.is_defined(a)


def test_fork_shares_frame_but_not_frame_pointer(env):
    other = env.fork()
    other.push_frame()
    other.define(a, 1)
    assert env.depth == 0
    assert other.depth == 1
    assert not env.is_defined(a)

    other.pop_frame()
    other.define(b, 2)
    assert env.find(b) == 2


def test_set_unbound_fails_everywhere_in_chain(env):
    env.push_frame()
    with pytest.raises(SprigVariableNotFound) as excinfo:
        env.set(a, 1)
    assert excinfo.value.name == "a"
    assert str(excinfo.value) == "RuntimeError: variable a not found"


def test_set_updates_nearest_binding_only(env):
    env.define(a, "outer")
    env.push_frame()
    env.define(a, "inner")
    env.set(a, "changed")
    env.pop_frame()
    assert env.find(a) == "outer"


def test_pop_root_frame_is_an_internal_failure(env):
    with pytest.raises(FrameUnderflowError):
        env.pop_frame()
    assert not issubclass(FrameUnderflowError, SprigError)


def test_scope_pops_on_error(env):
    with pytest.raises(ValueError):
        with env.scope():
            env.define(a, 1)
            assert env.depth == 1
            raise ValueError("boom")
    assert env.depth == 0
    assert not env.is_defined(a)


def test_fresh_environment_has_single_root_frame():
    env = Environment()
    assert env.depth == 0
    assert env.frame.outer is None
    assert env.frame.vars == {}


def test_str_and_repr_show_bindings(env):
    env.define(a, 1)
    env.push_frame()
    env.define(b, 2)
    assert str(env) == "{b: 2} -> ..."
    assert repr(env) == "<Environment chain: {b: 2} -> {a: 1}>"
