import os

import pytest

from printfkit.printf import (
    asprintf,
    dprintf,
    printf,
    render,
    snprintf,
    sprintf,
    vasprintf,
    vdprintf,
    vprintf,
    vsnprintf,
    vsprintf,
)
from printfkit.spec import FormatError
from printfkit.textconv import CountRef


def test_plain_text():
    assert sprintf("hello") == "hello"


def test_empty_format():
    assert sprintf("") == ""


def test_string_substitution():
    assert sprintf("hello %s", "world") == "hello world"


def test_integer():
    assert sprintf("%d", 42) == "42"


def test_negative_integer_with_width():
    result = sprintf("%6d", -42)
    assert len(result) == 6
    assert result.lstrip() == "-42"


def test_hex_and_alternate_form():
    assert sprintf("%x", 255) == "ff"
    assert sprintf("%#X", 255) == "0XFF"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"


def test_float_truncates_digits():
    assert sprintf("%.2f", 3.14159) == "3.14"


def test_custom_base():
    assert sprintf("%k", 5, "01") == "101"


def test_render_returns_buffer():
    out = render("%s-%s", ["a", "b"])
    assert out.to_string() == "a-b"
    assert len(out) == 3


def test_count_conversion():
    ref = CountRef()
    assert sprintf("abc%n!", ref) == "abc!"
    assert ref.value == len("abc")


def test_star_width():
    result = sprintf("%*d", 5, 7)
    assert len(result) == 5
    assert result.strip() == "7"


def test_vsprintf_matches_sprintf():
    assert vsprintf("%s=%d", ["k", 3]) == sprintf("%s=%d", "k", 3)


def test_asprintf_matches_sprintf():
    assert asprintf("%u items", 9) == sprintf("%u items", 9)
    assert vasprintf("%u items", [9]) == sprintf("%u items", 9)


def test_snprintf_truncates():
    assert snprintf(4, "hello") == ("hel", 5)


def test_snprintf_zero_size():
    assert snprintf(0, "hello") == ("", 5)


def test_snprintf_large_size():
    text, count = vsnprintf(100, "%s", ["hello"])
    assert text == "hello"
    assert count == len(text)


def test_unknown_conversion():
    with pytest.raises(FormatError):
        sprintf("%q", 1)


def test_duplicate_flag():
    with pytest.raises(FormatError):
        sprintf("%--d", 1)


def test_missing_argument():
    with pytest.raises(FormatError):
        sprintf("%d %d", 1)


def test_trailing_percent():
    with pytest.raises(FormatError):
        sprintf("abc%")


def test_format_must_be_string():
    with pytest.raises(FormatError):
        sprintf(None)


def test_printf_writes_stdout(capfd):
    count = printf("x=%d\n", 7)
    captured = capfd.readouterr()
    assert captured.out == "x=7\n"
    assert count == len("x=7\n")


def test_vprintf_writes_stdout(capfd):
    count = vprintf("%s", ["abc"])
    assert capfd.readouterr().out == "abc"
    assert count == 3


def test_printf_empty(capfd):
    assert printf("") == 0
    assert capfd.readouterr().out == ""


def test_dprintf_to_pipe():
    read_fd, write_fd = os.pipe()
    try:
        count = dprintf(write_fd, "%s!", "hi")
        os.close(write_fd)
        write_fd = None
        assert os.read(read_fd, 100) == b"hi!"
        assert count == 3
    finally:
        os.close(read_fd)
        if write_fd is not None:
            os.close(write_fd)


def test_vdprintf_error_writes_nothing():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(FormatError):
            vdprintf(write_fd, "ok %q", [1])
        os.close(write_fd)
        write_fd = None
        assert os.read(read_fd, 100) == b""
    finally:
        os.close(read_fd)
        if write_fd is not None:
            os.close(write_fd)