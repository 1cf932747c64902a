"""Opening the files and here-documents that a command redirects to."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .messages import HEREDOC_PROMPT, print_error
from .parser import Redirection, RedirType

ReadLine = Callable[[str], Optional[str]]


class RedirectionError(Exception):
    """Raised when a redirection target cannot be opened."""

    def __init__(self, target: str, error: OSError) -> None:
        super().__init__(f"{target}: {error.strerror or error}")
        self.target = target
        self.error = error


@dataclass
class Streams:
    """The files a command reads from and writes to; None keeps the inherited one."""

    stdin: Optional[BinaryIO] = None
    stdout: Optional[BinaryIO] = None

    def close(self) -> None:
        for stream in (self.stdin, self.stdout):
            if stream is not None:
                stream.close()

    def __enter__(self) -> "Streams":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def read_heredoc(delimiter: str, read_line: Optional[ReadLine] = None) -> str:
    """Collect lines until one equals ``delimiter`` or input ends.

    Every collected line is followed by a newline; the delimiter is not kept.
    """
    reader = _read_line if read_line is None else read_line
    lines: list[str] = []
    while True:
        line = reader(HEREDOC_PROMPT)
        if line is None or line == delimiter:
            break
        lines.append(line + "\n")
    return "".join(lines)


def _create_with_mode(path: str, flags: int) -> int:
    return os.open(path, flags, 0o644)


def _replace(old: Optional[BinaryIO], new: BinaryIO) -> BinaryIO:
    if old is not None:
        old.close()
    return new


def apply_redirections(
    redirections: Iterable[Redirection], read_line: Optional[ReadLine] = None
) -> Streams:
    """Open every redirection in order; a later one replaces an earlier one.

    Raises RedirectionError if a file cannot be opened. Failures to open an
    output file are also reported on stderr; everything opened so far is closed.
    """
    streams = Streams()
    try:
        for redir in redirections:
            if redir.type is RedirType.IN:
                try:
                    source = open(redir.target, "rb")
                except OSError as exc:
                    raise RedirectionError(redir.target, exc) from exc
                streams.stdin = _replace(streams.stdin, source)
            elif redir.type in (RedirType.OUT, RedirType.APPEND):
                mode = "wb" if redir.type is RedirType.OUT else "ab"
                try:
                    sink = open(redir.target, mode, opener=_create_with_mode)
                except OSError as exc:
                    print_error(redir.target, exc)
                    raise RedirectionError(redir.target, exc) from exc
                streams.stdout = _replace(streams.stdout, sink)
            elif redir.type is RedirType.HEREDOC:
                document = tempfile.TemporaryFile()
                document.write(read_heredoc(redir.target, read_line).encode())
                document.seek(0)
                streams.stdin = _replace(streams.stdin, document)
    except BaseException:
        streams.close()
        raise
    return streams