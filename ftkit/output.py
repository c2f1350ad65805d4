"""Writing characters, strings and numbers to file descriptors."""

import os
from typing import Union

CharLike = Union[int, str]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    written = 0
    while written < len(data):
        written += os.write(fd, view[written:])
    return written


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to ``fd`` and return the number of bytes written.

    The descriptor must be positive; standard input is refused.
    """
    if fd <= 0:
        raise ValueError(f"cannot write a character to descriptor {fd}")
    return _write_all(fd, _char_bytes(c))


def putstr_fd(s: str, fd: int) -> int:
    """Write ``s`` to ``fd`` and return the number of bytes written."""
    return _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> int:
    """Write ``s`` and a newline to ``fd``; return the bytes written."""
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal text of ``n`` to ``fd``; return the bytes written."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if fd <= 0:
        raise ValueError(f"cannot write a number to descriptor {fd}")
    return _write_all(fd, str(n).encode("ascii"))