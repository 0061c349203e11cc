"""Conversion between decimal text and integers."""

from __future__ import annotations

_SPACES = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading white space is skipped, one optional sign is read, then as many
    digits as follow.  Parsing stops at the first other character; text with
    no digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))