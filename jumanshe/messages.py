"""Shell-wide names and error reporting."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Union

SHELL_NAME = "jumanshe"
PROMPT = f"{SHELL_NAME}$ "
HEREDOC_PROMPT = "> "


def _describe(error: Union[OSError, int]) -> str:
    if isinstance(error, OSError):
        if error.strerror:
            return error.strerror
        if error.errno:
            return os.strerror(error.errno)
        return str(error)
    return os.strerror(error)


def print_error(msg: str, error: Union[OSError, int], stream: Optional[TextIO] = None) -> None:
    """Write ``msg: <reason>`` for an OSError or errno value, like perror."""
    out = sys.stderr if stream is None else stream
    reason = _describe(error)
    out.write(f"{msg}: {reason}\n" if msg else f"{reason}\n")


def print_command_not_found(cmd: str, stream: Optional[TextIO] = None) -> None:
    """Report that ``cmd`` could not be found."""
    out = sys.stderr if stream is None else stream
    out.write(f"{SHELL_NAME}: {cmd}: command not found\n")