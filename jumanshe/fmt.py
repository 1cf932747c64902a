"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _unsigned32(value: int) -> int:
    return value & 0xFFFFFFFF


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        value = _take(args)
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c requires a single character")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        value = _take(args)
        return "(null)" if value is None else str(value)
    if spec == "p":
        value = _take(args)
        if not value:
            return "(nil)"
        return f"0x{int(value) & 0xFFFFFFFFFFFFFFFF:x}"
    if spec in ("d", "i"):
        return str(_signed32(int(_take(args))))
    if spec == "u":
        return str(_unsigned32(int(_take(args))))
    if spec in ("x", "X"):
        return format(_unsigned32(int(_take(args))), spec)
    if spec == "%":
        return "%"
    return "%" + spec


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``.

    Unknown conversions are copied through with their ``%``; a lone ``%`` at
    the end raises ValueError. Extra arguments are ignored.
    """
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (default stdout); return its length."""
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)