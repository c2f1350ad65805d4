"""Byte-buffer helpers: filling, copying, searching, comparing and allocation."""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

_SIZE_MAX = 2**64 - 1


def _check_span(data: BytesLike, start: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if start < 0:
        raise ValueError(f"offset into {name} must not be negative, got {start}")
    if start + n > len(data):
        raise ValueError(
            f"{name} holds {len(data)} bytes, cannot reach {start + n}"
        )


def memset(buf: MutableBytes, c: int, n: int) -> MutableBytes:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256)."""
    _check_span(buf, 0, n, "buf")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: MutableBytes, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: MutableBytes, src: BytesLike, n: int) -> MutableBytes:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_span(dest, 0, n, "dest")
    _check_span(src, 0, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: MutableBytes, dest: int, src: int, n: int) -> MutableBytes:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap.
    """
    _check_span(buf, dest, n, "buf")
    _check_span(buf, src, n, "buf")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span(data, 0, n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    _check_span(a, 0, n, "a")
    _check_span(b, 0, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} bytes overflows the size limit")
    return bytearray(total)


def realloc(data: Optional[BytesLike], new_size: int) -> Optional[bytearray]:
    """A new buffer of ``new_size`` bytes starting with the old contents.

    A size of 0 releases the data and gives None. Bytes beyond the old
    contents are zero.
    """
    if new_size < 0:
        raise ValueError(f"size must not be negative, got {new_size}")
    if new_size == 0:
        return None
    result = bytearray(new_size)
    if data:
        keep = min(len(data), new_size)
        result[:keep] = bytes(data[:keep])
    return result