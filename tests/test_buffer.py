import os

import pytest

from printfkit.buffer import OutputBuffer
from printfkit.spec import FormatError


def test_add_and_to_string():
    buf = OutputBuffer()
    buf.add("a")
    buf.add("b")
    assert buf.to_string() == "ab"
    assert len(buf) == 2


def test_add_rejects_multiple_characters():
    buf = OutputBuffer()
    with pytest.raises(ValueError):
        buf.add("ab")


def test_add_text_preserves_order():
    buf = OutputBuffer()
    buf.add_text("0x")
    buf.add_text("ff")
    assert buf.to_string() == "0xff"


def test_fill_positive_amount():
    buf = OutputBuffer()
    buf.fill(3, " ")
    assert buf.to_string() == "   "


@pytest.mark.parametrize("amount", [0, -1, -100])
def test_fill_non_positive_adds_nothing(amount):
    buf = OutputBuffer()
    buf.fill(amount, "0")
    assert len(buf) == 0


def test_limit_raises_format_error():
    buf = OutputBuffer(limit=3)
    buf.add_text("abc")
    with pytest.raises(FormatError):
        buf.add("d")
    assert buf.to_string() == "abc"


def test_fill_over_limit_raises():
    buf = OutputBuffer(limit=2)
    with pytest.raises(FormatError):
        buf.fill(5, "x")
    assert len(buf) == 2


@pytest.mark.parametrize("size", [1, 2, 5, 6, 100])
def test_truncated_keeps_at_most_size_minus_one(size):
    buf = OutputBuffer()
    buf.add_text("hello")
    result = buf.truncated(size)
    assert result == "hello"[: size - 1]
    assert len(result) <= size - 1


def test_truncated_zero_size_is_empty():
    buf = OutputBuffer()
    buf.add_text("hello")
    assert buf.truncated(0) == ""


def test_truncated_does_not_change_length():
    buf = OutputBuffer()
    buf.add_text("hello")
    buf.truncated(2)
    assert len(buf) == 5
    assert buf.to_string() == "hello"


def test_write_to_pipe():
    read_fd, write_fd = os.pipe()
    try:
        buf = OutputBuffer()
        buf.add_text("hello world")
        count = buf.write_to(write_fd)
        os.close(write_fd)
        write_fd = -1
        data = os.read(read_fd, 100)
    finally:
        os.close(read_fd)
        if write_fd != -1:
            os.close(write_fd)
    assert count == len("hello world")
    assert data == b"hello world"


def test_write_empty_buffer_returns_zero():
    read_fd, write_fd = os.pipe()
    try:
        assert OutputBuffer().write_to(write_fd) == 0
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_write_to_bad_fd_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    buf = OutputBuffer()
    buf.add_text("x")
    with pytest.raises(OSError):
        buf.write_to(write_fd)