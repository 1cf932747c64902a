import io
import os

import pytest

from jumanshe.builtins import (
    ShellExit,
    builtin_cd,
    builtin_echo,
    builtin_env,
    builtin_exit,
    builtin_export,
    builtin_pwd,
    builtin_unset,
    is_builtin,
    run_builtin,
)
from jumanshe.environment import Shell


@pytest.fixture
def shell():
    return Shell.create({"A": "1", "B": "2"})


@pytest.mark.parametrize("name", ["echo", "cd", "pwd", "env", "export", "unset", "exit"])
def test_is_builtin_true(name):
    assert is_builtin(name) is True


@pytest.mark.parametrize("name", ["ech", "echoo", "ls", "", None])
def test_is_builtin_false(name):
    assert is_builtin(name) is False


def test_echo_prints_with_newline():
    out = io.StringIO()
    assert builtin_echo(["echo", "a", "b"], out) == 0
    assert out.getvalue() == "a b\n"


def test_echo_n_flags():
    out = io.StringIO()
    builtin_echo(["echo", "-n", "-nnn", "hi"], out)
    assert out.getvalue() == "hi"


def test_echo_invalid_flag_is_text():
    out = io.StringIO()
    builtin_echo(["echo", "-nx", "-"], out)
    assert out.getvalue() == "-nx -\n"


def test_pwd(shell, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert builtin_pwd(shell, out) == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_cd_updates_env(shell, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    before = os.getcwd()
    (tmp_path / "sub").mkdir()
    assert builtin_cd(shell, ["cd", "sub"]) == 0
    assert os.path.basename(os.getcwd()) == "sub"
    assert shell.env.get("PWD") == os.getcwd()
    assert shell.env.get("OLDPWD") == before


def test_cd_missing_argument(shell):
    err = io.StringIO()
    assert builtin_cd(shell, ["cd"], err) == 1
    assert err.getvalue() == "jumanshe: cd: missing argument\n"


def test_cd_too_many(shell):
    err = io.StringIO()
    assert builtin_cd(shell, ["cd", "a", "b"], err) == 1
    assert err.getvalue() == "jumanshe: cd: too many arguments\n"


def test_cd_nonexistent(shell, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    err = io.StringIO()
    assert builtin_cd(shell, ["cd", "missing"], err) == 1
    assert err.getvalue().startswith("cd: ")
    assert "PWD" not in shell.env


def test_env_lists_values(shell):
    shell.env.set("C", None)
    out = io.StringIO()
    assert builtin_env(shell, ["env"], out) == 0
    assert out.getvalue() == "A=1\nB=2\n"


def test_env_rejects_arguments(shell):
    err = io.StringIO()
    assert builtin_env(shell, ["env", "x"], io.StringIO(), err) == 1
    assert err.getvalue() == "jumanshe: env: no arguments supported\n"


def test_export_sets_values(shell):
    assert builtin_export(shell, ["export", "X=1=2", "Y", "=v"]) == 0
    assert shell.env.get("X") == "1=2"
    assert shell.env.get("Y") == ""
    assert len(shell.env) == 4


def test_export_without_args_lists(shell):
    out = io.StringIO()
    builtin_export(shell, ["export"], out)
    assert out.getvalue() == "A=1\nB=2\n"


def test_unset(shell):
    assert builtin_unset(shell, ["unset", "A", "NOPE"]) == 0
    assert list(shell.env) == [("B", "2")]


def test_exit_without_argument(shell):
    out = io.StringIO()
    with pytest.raises(ShellExit) as info:
        builtin_exit(shell, ["exit"], out)
    assert info.value.code == 0
    assert out.getvalue() == "exit\n"


@pytest.mark.parametrize("arg,code", [("7", 7), ("256", 0), ("-1", 255), ("+", 0)])
def test_exit_codes(shell, arg, code):
    with pytest.raises(ShellExit) as info:
        builtin_exit(shell, ["exit", arg], io.StringIO())
    assert info.value.code == code


def test_exit_non_numeric(shell):
    err = io.StringIO()
    with pytest.raises(ShellExit) as info:
        builtin_exit(shell, ["exit", "abc"], io.StringIO(), err)
    assert info.value.code == 2
    assert err.getvalue() == "jumanshe: exit: numeric argument required\n"


def test_exit_too_many(shell):
    err = io.StringIO()
    assert builtin_exit(shell, ["exit", "1", "2"], io.StringIO(), err) == 1
    assert err.getvalue() == "jumanshe: exit: too many arguments\n"


def test_run_builtin_dispatch(shell):
    out = io.StringIO()
    assert run_builtin(shell, ["echo", "x"], out) == 0
    assert out.getvalue() == "x\n"


def test_run_builtin_empty_argv(shell):
    assert run_builtin(shell, []) == 0


def test_run_builtin_unset(shell):
    run_builtin(shell, ["unset", "B"])
    assert shell.env.get("B") is None