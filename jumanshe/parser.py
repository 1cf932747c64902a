"""Grouping tokens into the commands of a pipeline."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from .lexer import Token, TokenType


class RedirType(enum.IntEnum):
    """Kinds of redirection."""

    IN = 0
    OUT = 1
    APPEND = 2
    HEREDOC = 3


_REDIR_FOR_TOKEN = {
    TokenType.REDIR_IN: RedirType.IN,
    TokenType.REDIR_OUT: RedirType.OUT,
    TokenType.REDIR_APPEND: RedirType.APPEND,
    TokenType.HEREDOC: RedirType.HEREDOC,
}


@dataclass(frozen=True)
class Redirection:
    """A redirection and its file name or here-document delimiter."""

    type: RedirType
    target: str


@dataclass
class Command:
    """One stage of a pipeline."""

    argv: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)


class ShellSyntaxError(Exception):
    """Raised for malformed command lines; the message omits the shell name."""


def parse_tokens(tokens: Iterable[Token]) -> list[Command]:
    """Build the pipeline described by ``tokens``.

    A pipe at the start or right after another pipe, or a redirection not
    followed by a word, raises ShellSyntaxError. A trailing pipe is ignored.
    """
    stream = iter(tokens)
    commands: list[Command] = []
    tok = next(stream, None)
    while tok is not None:
        if tok.type is TokenType.PIPE:
            raise ShellSyntaxError("syntax error near '|'")
        command = Command()
        while tok is not None and tok.type is not TokenType.PIPE:
            if tok.type is TokenType.WORD:
                command.argv.append(tok.value or "")
            else:
                target = next(stream, None)
                if target is None or target.type is not TokenType.WORD:
                    raise ShellSyntaxError("syntax error")
                command.redirections.append(
                    Redirection(_REDIR_FOR_TOKEN[tok.type], target.value or "")
                )
            tok = next(stream, None)
        commands.append(command)
        if tok is not None:
            tok = next(stream, None)
    return commands