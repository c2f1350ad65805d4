"""A growable text buffer with a read cursor and segment editing."""

from typing import Callable, Iterable, List, Optional, Union

from .text import strncmp

Comparator = Callable[[str, str, int], int]


def _check_text(value: str, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _check_index(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _check_char(value: str, name: str) -> str:
    _check_text(value, name)
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


class DynamicString:
    """Mutable text with a peek cursor for character-by-character scanning.

    Positions past the end are tolerated the way the editing operations
    define: most of them then leave the text unchanged.
    """

    __slots__ = ("_text", "_peek")

    def __init__(self, text: str = "") -> None:
        self._text = ""
        self._peek = 0
        self.set(text)

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"DynamicString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # mutable

    @property
    def cursor(self) -> int:
        """Position of the peek cursor."""
        return self._peek

    def set(self, text: str) -> None:
        """Replace the whole text and rewind the cursor."""
        self._text = _check_text(text, "text")
        self._peek = 0

    def append(self, text: str) -> None:
        """Add ``text`` at the end."""
        self._text += _check_text(text, "text")

    def prepend(self, text: str) -> None:
        """Add ``text`` at the front."""
        self._text = _check_text(text, "text") + self._text

    def insert(self, pos: int, text: str) -> None:
        """Insert ``text`` before ``pos``; a position past the end does nothing."""
        _check_index(pos, "pos")
        _check_text(text, "text")
        if pos > len(self._text):
            return
        self._text = self._text[:pos] + text + self._text[pos:]

    def erase(self, pos: int, length: int) -> None:
        """Remove up to ``length`` characters from ``pos``."""
        _check_index(pos, "pos")
        _check_index(length, "length")
        if pos >= len(self._text):
            return
        self._text = self._text[:pos] + self._text[pos + length:]

    def clear(self) -> None:
        """Empty the text and rewind the cursor."""
        self._text = ""
        self._peek = 0

    def find(self, needle: str) -> int:
        """Index of the first occurrence of ``needle``, or -1."""
        return self._text.find(_check_text(needle, "needle"))

    def replace(self, old: str, new: str) -> None:
        """Replace every non-overlapping ``old``, scanning left to right."""
        _check_text(old, "old")
        _check_text(new, "new")
        if not old:
            raise ValueError("the text to replace must not be empty")
        self._text = self._text.replace(old, new)

    def repeat(self, n: int) -> None:
        """Make the text ``n`` copies of itself; 0 leaves it unchanged."""
        _check_index(n, "n")
        if n:
            self._text *= n

    def peek(self) -> str:
        """The character under the cursor, or '' at the end."""
        if self._peek >= len(self._text):
            return ""
        return self._text[self._peek]

    def peek_advance(self) -> str:
        """The character under the cursor, moving past it; '' at the end."""
        ch = self.peek()
        if ch:
            self._peek += 1
        return ch

    def peek_reset(self) -> str:
        """Rewind the cursor and return the first character; '' when empty."""
        if not self._text:
            return ""
        self._peek = 0
        return self._text[0]

    def shift(self) -> str:
        """Remove and return the first character; '' when empty."""
        if not self._text:
            return ""
        ch = self._text[0]
        self._text = self._text[1:]
        return ch

    def shift_by(self, offset: int) -> None:
        """Drop the first ``offset`` characters; dropping all clears the text."""
        _check_index(offset, "offset")
        if offset >= len(self._text):
            self.clear()
            return
        self._text = self._text[offset:]

    def shift_while(self, charset: str) -> None:
        """Drop leading characters that appear in ``charset``."""
        self._text = self._text.lstrip(_check_text(charset, "charset"))

    def match(
        self, target: str, start: int = 0, cmp: Optional[Comparator] = None
    ) -> bool:
        """True when ``target`` lies wholly in the text at ``start``.

        ``cmp(text_from_start, target, len(target))`` decides equality and
        returns 0 for a match; by default a plain character comparison.
        """
        _check_text(target, "target")
        _check_index(start, "start")
        compare = strncmp if cmp is None else cmp
        if start >= len(self._text) or start + len(target) > len(self._text):
            return False
        return compare(self._text[start:], target, len(target)) == 0

    def segment_remove(self, start: int, length: int) -> None:
        """Remove up to ``length`` characters from ``start``."""
        self.erase(start, length)

    def segments_count(self, delimiter: str) -> int:
        """Number of non-empty pieces between occurrences of ``delimiter``."""
        _check_char(delimiter, "delimiter")
        return sum(1 for piece in self._text.split(delimiter) if piece)

    def segment_extract(self, start: int, length: int) -> Optional[str]:
        """Up to ``length`` characters from ``start``; None past the end."""
        _check_index(start, "start")
        _check_index(length, "length")
        if start >= len(self._text):
            return None
        return self._text[start:start + length]

    def segment_slice(self, start: int, length: int) -> Optional[str]:
        """Same as :meth:`segment_extract`."""
        return self.segment_extract(start, length)

    def segment_replace(self, start: int, length: int, new_text: str) -> None:
        """Replace up to ``length`` characters at ``start`` with ``new_text``."""
        _check_text(new_text, "new_text")
        self.segment_remove(start, length)
        self.insert(start, new_text)

    def substr(self, start: int, length: int) -> "DynamicString":
        """A new string of up to ``length`` characters from ``start``."""
        piece = self.segment_extract(start, length)
        return DynamicString(piece or "")

    def split(self, delimiter: str) -> List["DynamicString"]:
        """The non-empty pieces between occurrences of ``delimiter``."""
        _check_char(delimiter, "delimiter")
        return [DynamicString(piece) for piece in self._text.split(delimiter) if piece]


def join(
    strings: Iterable[Union[DynamicString, str]], delimiter: Optional[str] = None
) -> DynamicString:
    """Concatenate ``strings`` with ``delimiter`` between them."""
    separator = "" if delimiter is None else _check_text(delimiter, "delimiter")
    return DynamicString(separator.join(str(item) for item in strings))