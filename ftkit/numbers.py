"""Conversions between text and numbers, and numeric-text checks."""

from itertools import takewhile

from .chars import isdigit

_SPACES = " \t\n\v\f\r"
_LONG_BITS = 64
_INT_BITS = 32


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def _split_sign(text: str) -> tuple:
    """Return (sign, rest) after an optional leading '+' or '-'."""
    if text[:1] == "-":
        return -1, text[1:]
    if text[:1] == "+":
        return 1, text[1:]
    return 1, text


def _parse_integer(text: str, bits: int) -> int:
    sign, rest = _split_sign(text.lstrip(_SPACES))
    n = 0
    for ch in takewhile(isdigit, rest):
        prev = n
        n = _wrap(n * 10 + (ord(ch) - ord("0")), _LONG_BITS)
        if n < prev:
            return 0 if sign < 0 else -1
    return _wrap(n * sign, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. When the digits overflow a 64-bit accumulator the
    result is -1, or 0 for a negative number.
    """
    return _parse_integer(text, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value.

    Same rules as :func:`atoi`.
    """
    return _parse_integer(text, _LONG_BITS)


def atof(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Only spaces are skipped before the optional sign. Exponents are not
    recognised; parsing stops at the first character that does not fit.
    """
    sign, rest = _split_sign(text.lstrip(" "))
    whole = "".join(takewhile(isdigit, rest))
    rest = rest[len(whole):]
    value = 0.0
    for ch in whole:
        value = value * 10 + (ord(ch) - ord("0"))
    if rest[:1] == ".":
        rest = rest[1:]
    divisor = 10
    for ch in takewhile(isdigit, rest):
        value = value + (ord(ch) - ord("0")) / divisor
        divisor *= 10
    return value * sign


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits


def strisnum(text: str) -> bool:
    """True when ``text`` is a signed decimal number, fraction allowed.

    At least one digit is required, on either side of the optional point.
    """
    _, rest = _split_sign(text)
    whole = "".join(takewhile(isdigit, rest))
    rest = rest[len(whole):]
    if rest[:1] == ".":
        rest = rest[1:]
    fraction = "".join(takewhile(isdigit, rest))
    rest = rest[len(fraction):]
    return not rest and bool(whole or fraction)


def strisdecimal(text: str) -> bool:
    """True when ``text`` is an optional sign followed only by digits.

    The digit run may be empty.
    """
    _, rest = _split_sign(text)
    return all(isdigit(ch) for ch in rest)


def strisempty(text: str) -> bool:
    """True when ``text`` holds nothing but spaces."""
    return not text.lstrip(" ")