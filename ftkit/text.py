"""String searching, comparison, copying and splitting helpers.

Positions are returned as indexes into the string rather than pointers,
and None stands for "not found". A search for the NUL character finds the
virtual terminator at ``len(s)``.
"""

from itertools import takewhile
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise ``c`` to a one-character string, truncating ints to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: Optional[str], c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL gives ``len(s)``.
    """
    if s is None:
        return None
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    a = s1 if limit is None else s1[:limit]
    b = s2 if limit is None else s2[:limit]
    common = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))
    return _code_at(s1, common) - _code_at(s2, common)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the difference of the first differing characters."""
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _check_non_negative(n, "n")
    if n == 0:
        return 0
    return _compare(s1, s2, n - 1)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; None when there is no match.
    """
    _check_non_negative(length, "length")
    if len(haystack) < len(needle) or length < len(needle):
        return None
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had; when ``size`` does not exceed ``len(dst)`` that length is
    ``len(src) + size`` and ``dst`` is left as it is.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def strndup(s: str, n: int) -> str:
    """A copy of the first ``n`` characters of ``s``."""
    _check_non_negative(n, "n")
    return s[:n]


def substr(s: Optional[str], start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``.

    A missing string or a start past the end gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if s is None or start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing one counts as empty."""
    return (s1 or "") + (s2 or "")


def split(s: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if s is None:
        return None
    return [word for word in s.split(_char(sep)) if word]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    if charset is None:
        return s
    return s.strip(charset)


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string built from ``f(index, char)`` for each character."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, MutableSequence[str]], None]],
) -> None:
    """Call ``f(index, s)`` for each position of the mutable sequence ``s``.

    ``f`` may change ``s[index]`` in place.
    """
    if s is None or f is None:
        return
    for index in range(len(s)):
        f(index, s)