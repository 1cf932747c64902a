"""Small string helpers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def atoi(text: str) -> int:
    """Parse a leading decimal integer as C ``atoi`` does, wrapped to 32 bits.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    if negative:
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def strtrim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text