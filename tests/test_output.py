import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(read_fd, write_fd):
    os.close(write_fd)
    chunks = []
    while True:
        chunk = os.read(read_fd, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_putchar_fd(pipe):
    r, w = pipe
    assert putchar_fd("z", w) == 1
    assert putchar_fd(ord("y"), w) == 1
    assert _drain(r, w) == b"zy"


def test_putchar_fd_rejects_stdin():
    with pytest.raises(ValueError):
        putchar_fd("a", 0)


def test_putchar_fd_rejects_long_string(pipe):
    _, w = pipe
    with pytest.raises(ValueError):
        putchar_fd("ab", w)


def test_putstr_fd(pipe):
    r, w = pipe
    assert putstr_fd("hello", w) == len("hello")
    assert _drain(r, w) == b"hello"


def test_putstr_fd_empty(pipe):
    r, w = pipe
    assert putstr_fd("", w) == 0
    assert _drain(r, w) == b""


def test_putendl_fd(pipe):
    r, w = pipe
    assert putendl_fd("line", w) == len("line") + 1
    assert _drain(r, w) == b"line\n"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_putnbr_fd_matches_decimal_text(pipe, n):
    r, w = pipe
    count = putnbr_fd(n, w)
    data = _drain(r, w)
    assert int(data) == n
    assert count == len(data)


def test_putnbr_fd_negative_sign(pipe):
    r, w = pipe
    putnbr_fd(-5, w)
    assert _drain(r, w) == b"-5"


def test_putnbr_fd_rejects_non_int(pipe):
    _, w = pipe
    with pytest.raises(TypeError):
        putnbr_fd("12", w)


def test_write_to_closed_descriptor_raises():
    r, w = os.pipe()
    os.close(r)
    os.close(w)
    with pytest.raises(OSError):
        putstr_fd("x", w)


def test_write_to_file(tmp_path):
    path = tmp_path / "out.txt"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT)
    try:
        putstr_fd("ab", fd)
        putnbr_fd(12, fd)
        putendl_fd("", fd)
    finally:
        os.close(fd)
    assert path.read_bytes() == b"ab12\n"