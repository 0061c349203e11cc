"""String helpers with C-library semantics on Python strings.

Searches return an index instead of a pointer, and ``None`` where
nothing is found.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def split(s: str, c: str) -> list[str]:
    """Split on a separator character, dropping empty words."""
    return [word for word in s.split(c) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, with the end of
    a string counting as code 0, or 0 when the prefixes are equal.
    """
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters from ``start``; empty past the end."""
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends."""
    return s.strip(charset)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``, so a
    truncation shows as a returned length of at least ``size``.
    """
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have
    had without truncation.  When ``size`` cannot hold ``dst`` and its
    terminator, ``dst`` is left as it is and ``len(src) + size`` is
    returned.
    """
    dst_len = len(dst)
    if size < dst_len + 1:
        return dst, len(src) + size
    result = dst
    if size > dst_len + 1:
        result = dst + src[: size - 1 - dst_len]
    return result, dst_len + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace every character in place with ``f(index, char)``."""
    for i, ch in enumerate(chars):
        chars[i] = f(i, ch)