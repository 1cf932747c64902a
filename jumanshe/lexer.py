"""Splitting a command line into words, pipes and redirection operators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .environment import Shell

_BLANKS = " \t"
_WORD_BREAK = " \t|<>"
_PLAIN_STOP = _WORD_BREAK + "'\"$"


class TokenType(enum.Enum):
    """Kinds of token produced by :func:`tokenize`."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    REDIR_APPEND = enum.auto()
    HEREDOC = enum.auto()


@dataclass(frozen=True)
class Token:
    """One lexical unit; only words carry a value."""

    type: TokenType
    value: Optional[str] = None


def _is_name_char(ch: str) -> bool:
    return ch == "_" or "a" <= ch <= "z" or "A" <= ch <= "Z" or "0" <= ch <= "9"


class _Lexer:
    def __init__(self, shell: Shell, line: str) -> None:
        self.shell = shell
        self.line = line
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.line[index] if index < len(self.line) else ""

    def _expand_variable(self) -> str:
        """Expand the ``$`` at the current position and move past the name."""
        if self._peek(1) == "?":
            self.pos += 2
            return str(self.shell.last_exit_status)
        end = self.pos + 1
        while end < len(self.line) and _is_name_char(self.line[end]):
            end += 1
        name = self.line[self.pos + 1:end]
        self.pos = end
        value = self.shell.env.get(name)
        return "" if value is None else value

    def _single_quoted(self) -> Optional[str]:
        end = self.line.find("'", self.pos + 1)
        if end < 0:
            return None
        text = self.line[self.pos + 1:end]
        self.pos = end + 1
        return text

    def _double_quoted(self) -> str:
        self.pos += 1
        if self._peek() == "$":
            text = self._expand_variable()
        else:
            end = self.line.find('"', self.pos)
            if end < 0:
                end = len(self.line)
            text = self.line[self.pos:end]
            self.pos = end
        if self._peek() == '"':
            self.pos += 1
        return text

    def _plain(self) -> str:
        start = self.pos
        while self.pos < len(self.line) and self.line[self.pos] not in _PLAIN_STOP:
            self.pos += 1
        return self.line[start:self.pos]

    def _word(self) -> str:
        parts: list[str] = []
        while self.pos < len(self.line) and self.line[self.pos] not in _WORD_BREAK:
            ch = self.line[self.pos]
            if ch == "'":
                text = self._single_quoted()
                if text is None:
                    # An unclosed quote ends the word and the rest of the line.
                    self.pos = len(self.line)
                    break
                parts.append(text)
            elif ch == '"':
                parts.append(self._double_quoted())
            elif ch == "$":
                parts.append(self._expand_variable())
            else:
                parts.append(self._plain())
        return "".join(parts)

    def _redirection(self) -> Token:
        for operator, kind in (
            ("<<", TokenType.HEREDOC),
            (">>", TokenType.REDIR_APPEND),
            ("<", TokenType.REDIR_IN),
            (">", TokenType.REDIR_OUT),
        ):
            if self.line.startswith(operator, self.pos):
                self.pos += len(operator)
                return Token(kind)
        raise AssertionError("not at a redirection operator")

    def tokens(self) -> list[Token]:
        result: list[Token] = []
        while self.pos < len(self.line):
            while self._peek() and self._peek() in _BLANKS:
                self.pos += 1
            ch = self._peek()
            if not ch:
                break
            if ch == "|":
                result.append(Token(TokenType.PIPE))
                self.pos += 1
            elif ch in "<>":
                result.append(self._redirection())
            else:
                result.append(Token(TokenType.WORD, self._word()))
        return result


def tokenize(shell: Shell, line: str) -> list[Token]:
    """Split ``line`` into tokens, expanding ``$NAME`` and ``$?`` from ``shell``."""
    return _Lexer(shell, line).tokens()