import pytest

from risp.types.environment import Environment, EnvironmentStack


def test_setting_and_getting_values(env_stack):
    env_stack.set("my-var", 3)
    assert env_stack.get("my-var") == 3


def test_missing_name_is_none(env_stack):
    assert env_stack.get("nope") is None


def test_last_write_wins():
    env = Environment()
    env.set("a", 1)
    env.set("a", 2)
    assert env.get("a") == 2
    assert len(env) == 1


def test_shadowing(env_stack):
    env_stack.set("my-var", 3)

    env_stack.push_environment({"my-var": 2})
    assert env_stack.get("my-var") == 2

    env_stack.push_environment({"my-var": 5})
    assert env_stack.get("my-var") == 5

    env_stack.pop_environment()
    assert env_stack.get("my-var") == 2
    env_stack.pop_environment()
    assert env_stack.get("my-var") == 3

    # One pop too many leaves the global environment alone
    assert env_stack.pop_environment() is None
    assert env_stack.get("my-var") == 3
    assert env_stack.depth == 0


def test_lookup_falls_through_frames(env_stack):
    env_stack.set("g", "global")
    env_stack.push_environment({"outer": 1})
    env_stack.push_environment({"inner": 2})
    assert env_stack.get("outer") == 1
    assert env_stack.get("inner") == 2
    assert env_stack.get("g") == "global"


def test_set_writes_into_innermost_frame(env_stack):
    env_stack.push_environment({})
    env_stack.set("local", 1)
    assert env_stack.get("local") == 1
    env_stack.pop_environment()
    assert env_stack.get("local") is None


def test_call_frame_pops_on_error(env_stack):
    with pytest.raises(RuntimeError):
        with env_stack.call_frame({"a": 1}):
            assert env_stack.depth == 1
            raise RuntimeError("boom")
    assert env_stack.depth == 0
    assert env_stack.get("a") is None


def test_repr_lists_frames(env_stack):
    env_stack.set("g", 1)
    env_stack.push_environment({"a": 2})
    assert repr(env_stack) == "<EnvironmentStack: {a: 2} -> {g: 1}>"
