"""Shell-like splitting of a command line into tokens.

Tokens are separated by spaces and tabs. A quoted run (single or double
quotes) and a backslash-escaped character belong to the surrounding token;
quotes and backslashes are kept in the tokens as written. Whitespace that
ends the line gives a final empty token.
"""

from typing import List

_BLANKS = " \t"
_QUOTES = "\"'"


def _quoted_length(s: str, start: int) -> int:
    """Length of the quoted run at ``start``, closing quote included if present."""
    end = s.find(s[start], start + 1)
    if end < 0:
        return len(s) - start
    return end + 1 - start


def _token_length(s: str, start: int) -> int:
    i = start
    n = len(s)
    while i < n and s[i] not in _BLANKS:
        if s[i] in _QUOTES:
            i += _quoted_length(s, i)
        if i < n and s[i] == "\\":
            i += 1
        if i < n:
            i += 1
    return i - start


def _count_tokens(s: str) -> int:
    count = 0
    i = 0
    n = len(s)
    while i < n:
        while i < n and s[i] in _BLANKS:
            i += 1
        count += 1
        if i < n and s[i] in _QUOTES:
            i += _quoted_length(s, i)
        i += _token_length(s, i)
    return count


def tokenize(s: str) -> List[str]:
    """Split ``s`` into tokens."""
    tokens = []
    i = 0
    n = len(s)
    for _ in range(_count_tokens(s)):
        while i < n and s[i] in _BLANKS:
            i += 1
        length = _token_length(s, i)
        tokens.append(s[i:i + length])
        i += length
    return tokens