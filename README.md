# ftkit

A small collection of helpers for character classification, byte buffers,
number parsing, string manipulation, command-line tokenizing, a singly
linked list, writing to file descriptors, a growable string type, and
program lookup on `PATH`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: `isalnum`, `isalpha`, `isascii`, `isblank`, `isdigit`,
  `isprint`, `tolower`, `toupper`. Each takes an integer code or a
  one-character string; only ASCII ranges count. `tolower` and `toupper`
  return the same kind of value they were given.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memchr`, `memcmp` on byte
  buffers; `memmove(buf, dest, src, n)` copies between offsets of one
  buffer, overlaps allowed. `calloc` gives a zeroed `bytearray`, `realloc`
  a resized copy (or `None` for size 0). Out-of-range lengths raise
  `ValueError`.
- `ftkit.numbers`: `atoi` (32-bit result) and `atol` (64-bit result) parse a
  leading integer after whitespace and one sign; `atof` parses a leading
  decimal number with an optional fraction; `itoa` gives decimal text.
  The checks `strisnum`, `strisdecimal` and `strisempty` return booleans.
- `ftkit.text`: `strchr`, `strrchr` and `strnstr` return indexes or `None`;
  `strcmp` and `strncmp` return the difference of the first differing
  characters; `strlcpy` and `strlcat` return the resulting text together
  with the length the full result would have had; also `strndup`, `substr`,
  `strjoin`, `split` (drops empty pieces), `strtrim`, `strmapi`, `striteri`.
- `ftkit.tokenize`: `tokenize` splits a command line on spaces and tabs,
  keeping quoted runs and backslash escapes, as written, inside their token.
- `ftkit.environ`: `getenv(envp, "NAME=")` looks up an entry in a list of
  `NAME=value` strings, `getpath` splits a `PATH` value into directories
  ending in `/`, and `execvpe` replaces the current process with a program
  found on that path, raising `FileNotFoundError` when none can be run.
- `ftkit.linkedlist`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, and the moves
  `push_to`, `rotate`, `reverse_rotate` and `swap`.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write to a file descriptor and return the number of bytes written.
- `ftkit.dynstring`: `DynamicString`, a mutable string with a peek cursor,
  insertion, erasing, replacing, shifting, segment editing and splitting,
  and `join` to combine several strings with a delimiter.

## Example

```python
from ftkit.dynstring import DynamicString, join
from ftkit.numbers import atoi
from ftkit.tokenize import tokenize

s = DynamicString("a,b,,c")
str(join(s.split(","), "-"))        # 'a-b-c'

tokenize("ls  -l\tsrc")             # ['ls', '-l', 'src']
tokenize('echo a"b c"d')            # ['echo', 'a"b c"d']

atoi("  -42abc")                    # -42
```

## What it does not do

- There is no printf-style formatting: no conversion of `%d`, `%s`, `%x`
  and the like with flags, width and precision. Use Python's own string
  formatting together with `ftkit.output` to write the result.
- There is no command-line program; the package is a library only.