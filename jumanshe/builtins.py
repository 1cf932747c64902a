"""Commands the shell runs itself."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional, TextIO

from .environment import Shell
from .messages import SHELL_NAME, print_error

BUILTIN_NAMES = frozenset({"echo", "cd", "pwd", "env", "export", "unset", "exit"})


class ShellExit(Exception):
    """Raised by the exit builtin; ``code`` is the status to exit with."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def is_builtin(name: Optional[str]) -> bool:
    """Tell whether ``name`` is one of the builtin commands."""
    return name in BUILTIN_NAMES


def _is_n_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def builtin_echo(argv: Sequence[str], stdout: Optional[TextIO] = None) -> int:
    """Print the arguments; leading ``-n``/``-nnn`` flags drop the newline."""
    args = list(argv[1:])
    newline = True
    while args and _is_n_flag(args[0]):
        newline = False
        args.pop(0)
    out = _out(stdout)
    out.write(" ".join(args))
    if newline:
        out.write("\n")
    return 0


def builtin_pwd(shell: Shell, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Print the current directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print_error("getcwd", exc, _err(stderr))
        return 1
    _out(stdout).write(cwd + "\n")
    return 0


def builtin_cd(shell: Shell, argv: Sequence[str], stderr: Optional[TextIO] = None) -> int:
    """Change directory to the single argument and update PWD and OLDPWD."""
    err = _err(stderr)
    try:
        old_pwd: Optional[str] = os.getcwd()
    except OSError:
        old_pwd = None
    if len(argv) < 2:
        err.write(f"{SHELL_NAME}: cd: missing argument\n")
        return 1
    if len(argv) > 2:
        err.write(f"{SHELL_NAME}: cd: too many arguments\n")
        return 1
    try:
        os.chdir(argv[1])
    except OSError as exc:
        print_error("cd", exc, err)
        return 1
    try:
        cwd = os.getcwd()
    except OSError:
        return 0
    if old_pwd is not None:
        shell.env.set("OLDPWD", old_pwd)
    shell.env.set("PWD", cwd)
    return 0


def builtin_env(
    shell: Shell,
    argv: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Print every variable that has a value as ``NAME=value``."""
    if len(argv) > 1:
        _err(stderr).write(f"{SHELL_NAME}: env: no arguments supported\n")
        return 1
    out = _out(stdout)
    for name, value in shell.env:
        if value is not None:
            out.write(f"{name}={value}\n")
    return 0


def builtin_export(
    shell: Shell,
    argv: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Set ``NAME=value`` pairs; a bare NAME gets an empty value. No arguments lists the environment."""
    if len(argv) < 2:
        return builtin_env(shell, argv, stdout, stderr)
    for arg in argv[1:]:
        name, _, value = arg.partition("=")
        if name:
            shell.env.set(name, value)
    return 0


def builtin_unset(shell: Shell, argv: Sequence[str]) -> int:
    """Remove each named variable."""
    for name in argv[1:]:
        shell.env.unset(name)
    return 0


def _numeric_value(text: str) -> Optional[int]:
    if not text:
        return None
    sign = -1 if text[0] == "-" else 1
    digits = text[1:] if text[0] in "+-" else text
    if not all("0" <= ch <= "9" for ch in digits):
        return None
    return sign * int(digits) if digits else 0


def builtin_exit(
    shell: Shell,
    argv: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Print ``exit`` and raise ShellExit; returns 1 only for too many arguments."""
    _out(stdout).write("exit\n")
    if len(argv) < 2:
        raise ShellExit(0)
    value = _numeric_value(argv[1])
    if value is None:
        _err(stderr).write(f"{SHELL_NAME}: exit: numeric argument required\n")
        raise ShellExit(2)
    if len(argv) > 2:
        _err(stderr).write(f"{SHELL_NAME}: exit: too many arguments\n")
        return 1
    raise ShellExit(value & 0xFF)


def run_builtin(
    shell: Shell,
    argv: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the builtin named by ``argv[0]`` and return its status (0 if none)."""
    if not argv:
        return 0
    name = argv[0]
    if name == "echo":
        return builtin_echo(argv, stdout)
    if name == "cd":
        return builtin_cd(shell, argv, stderr)
    if name == "pwd":
        return builtin_pwd(shell, stdout, stderr)
    if name == "env":
        return builtin_env(shell, argv, stdout, stderr)
    if name == "export":
        return builtin_export(shell, argv, stdout, stderr)
    if name == "unset":
        return builtin_unset(shell, argv)
    if name == "exit":
        return builtin_exit(shell, argv, stdout, stderr)
    return 0