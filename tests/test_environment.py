import pytest

from jumanshe.environment import Environment, Shell


def test_from_environ_skips_entries_without_equals():
    env = Environment.from_environ(["A=1", "B", "C=x=y"])
    assert len(env) == 2
    assert env.get("A") == "1"
    assert env.get("B") is None
    assert env.get("C") == "x=y"


def test_from_environ_empty_value():
    env = Environment.from_environ(["EMPTY="])
    assert env.get("EMPTY") == ""
    assert "EMPTY" in env


def test_from_environ_first_duplicate_wins():
    env = Environment.from_environ(["K=first", "K=second"])
    assert env.get("K") == "first"
    assert len(env) == 1


def test_from_environ_mapping():
    env = Environment.from_environ({"HOME": "/home/u", "PATH": "/bin"})
    assert list(env) == [("HOME", "/home/u"), ("PATH", "/bin")]


def test_from_environ_none_is_empty():
    assert len(Environment.from_environ(None)) == 0


def test_set_existing_keeps_order():
    env = Environment([("A", "1"), ("B", "2"), ("C", "3")])
    env.set("B", "changed")
    assert [name for name, _ in env] == ["A", "B", "C"]
    assert env.get("B") == "changed"


def test_set_new_appends():
    env = Environment([("A", "1")])
    env.set("Z", "9")
    assert list(env)[-1] == ("Z", "9")
    assert len(env) == 2


def test_get_requires_exact_name():
    env = Environment([("PATH", "/bin")])
    assert env.get("PAT") is None
    assert env.get("PATHX") is None


def test_unset_removes_and_missing_is_ignored():
    env = Environment([("A", "1"), ("B", "2")])
    env.unset("A")
    assert "A" not in env
    assert len(env) == 1
    env.unset("NOPE")
    assert list(env) == [("B", "2")]


def test_to_envp_round_trip():
    env = Environment([("A", "1"), ("B", ""), ("C", "x=y")])
    again = Environment.from_environ(env.to_envp())
    assert list(again) == list(env)


def test_to_envp_skips_valueless():
    env = Environment([("A", "1"), ("B", None)])
    assert env.to_envp() == ["A=1"]
    assert len(env) == 2


def test_iteration_is_a_snapshot():
    env = Environment([("A", "1"), ("B", "2")])
    for name, _ in env:
        env.unset(name)
    assert len(env) == 0


def test_shell_create_defaults():
    shell = Shell.create(["USER=someone"])
    assert shell.last_exit_status == 0
    assert shell.is_interactive is False
    assert shell.env.get("USER") == "someone"


def test_shell_create_uses_process_environment(monkeypatch):
    monkeypatch.setenv("JUMANSHE_TEST_VAR", "value")
    shell = Shell.create()
    assert shell.env.get("JUMANSHE_TEST_VAR") == "value"


@pytest.mark.parametrize("name", ["A", "LONG_NAME", "_x1"])
def test_set_then_get(name):
    env = Environment()
    env.set(name, "v")
    assert env.get(name) == "v"