"""Lazy unit readers over a binary stream."""

from typing import BinaryIO, Iterator

from .config import LINE_MODE, MAX_UNIT_BYTES, READ_CHUNK_BYTES, WORD_MODE
from .errors import ConfigurationError, UnitTooLongError

_WHITESPACE = frozenset(b' \t\n\r\x0b\x0c')


def read_lines(stream: BinaryIO, max_unit_bytes: int = MAX_UNIT_BYTES) -> Iterator[bytes]:
    """Yield each line without its newline. A final unterminated line is yielded if non-empty."""
    index = 0
    while True:
        # One byte past the bound is enough to tell a full line from an over-long one
        line = stream.readline(max_unit_bytes + 1)
        if not line:
            return
        index += 1
        if line.endswith(b'\n'):
            yield line[:-1]
        elif len(line) > max_unit_bytes:
            raise UnitTooLongError(index, max_unit_bytes)
        else:
            yield line


def read_words(stream: BinaryIO, max_unit_bytes: int = MAX_UNIT_BYTES) -> Iterator[bytes]:
    """Yield maximal runs of non-whitespace bytes."""
    word = bytearray()
    index = 0
    while True:
        chunk = stream.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        for byte in chunk:
            if byte in _WHITESPACE:
                if word:
                    yield bytes(word)
                    word.clear()
                continue
            if not word:
                index += 1
            if len(word) >= max_unit_bytes:
                raise UnitTooLongError(index, max_unit_bytes)
            word.append(byte)
    if word:
        yield bytes(word)


def read_units(stream: BinaryIO, mode: str, max_unit_bytes: int = MAX_UNIT_BYTES) -> Iterator[bytes]:
    """Pick the reader for `mode`."""
    if mode == LINE_MODE:
        return read_lines(stream, max_unit_bytes)
    if mode == WORD_MODE:
        return read_words(stream, max_unit_bytes)
    raise ConfigurationError(f"unknown mode: {mode!r}")
