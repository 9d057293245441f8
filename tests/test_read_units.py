import io

import pytest

from truncate_n.filter.errors import ConfigurationError, UnitTooLongError
from truncate_n.filter.read_units import read_lines, read_units, read_words


def test_lines_strip_newline_only():
    assert list(read_lines(io.BytesIO(b"a b\r\n\nc\n"))) == [b"a b\r", b"", b"c"]


def test_unterminated_last_line_is_a_unit():
    assert list(read_lines(io.BytesIO(b"one\ntwo"))) == [b"one", b"two"]


def test_empty_input_yields_nothing():
    assert list(read_lines(io.BytesIO(b""))) == []
    assert list(read_words(io.BytesIO(b""))) == []


def test_line_exactly_at_bound_is_accepted():
    assert list(read_lines(io.BytesIO(b"abcd\nabcd"), max_unit_bytes=4)) == [b"abcd", b"abcd"]


def test_line_over_bound_reports_index():
    lines = read_lines(io.BytesIO(b"ok\nabcde\n"), max_unit_bytes=4)
    assert next(lines) == b"ok"
    with pytest.raises(UnitTooLongError) as exc_info:
        next(lines)
    assert exc_info.value.index == 2


def test_line_reader_never_reads_past_bound():
    source = io.BytesIO(b"x" * 100)
    with pytest.raises(UnitTooLongError):
        list(read_lines(source, max_unit_bytes=10))
    assert source.tell() == 11


def test_words_split_on_ascii_whitespace():
    data = b"a\tb\nc\rd\x0be\x0cf g"
    assert list(read_words(io.BytesIO(data))) == [b"a", b"b", b"c", b"d", b"e", b"f", b"g"]


def test_non_ascii_bytes_are_word_bytes():
    assert list(read_words(io.BytesIO(b"\xa0x\x85 y"))) == [b"\xa0x\x85", b"y"]


def test_word_exactly_at_bound_is_accepted():
    assert list(read_words(io.BytesIO(b"abc abcd"), max_unit_bytes=4)) == [b"abc", b"abcd"]


def test_word_over_bound_reports_index():
    with pytest.raises(UnitTooLongError) as exc_info:
        list(read_words(io.BytesIO(b"a  b\n\ncdefg"), max_unit_bytes=4))
    assert exc_info.value.index == 3


def test_reader_is_not_restartable():
    units = read_units(io.BytesIO(b"a\nb\n"), "line")
    assert list(units) == [b"a", b"b"]
    assert list(units) == []


def test_unknown_mode():
    with pytest.raises(ConfigurationError):
        read_units(io.BytesIO(b""), "char")
