"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union


def put_char(c: Union[str, int], stream: TextIO) -> None:
    """Write one character, given as a string or as a character code."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write a string as it is."""
    stream.write(s)


def put_endl(s: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write an integer in decimal, with a leading minus when negative."""
    stream.write(str(int(n)))