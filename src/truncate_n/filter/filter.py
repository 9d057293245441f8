"""Truncate each line or word of a byte stream to at most N bytes."""

from typing import BinaryIO, Sequence, TextIO

import click

from .config import LINE_MODE, MAX_UNIT_BYTES, MODES
from .errors import ConfigurationError, UnitTooLongError
from .parse_limit import parse_limit
from .read_units import read_units
from .truncate_unit import truncate_unit


def truncate_stream(
    limit: int,
    source: BinaryIO,
    sink: BinaryIO,
    mode: str = LINE_MODE,
    max_unit_bytes: int = MAX_UNIT_BYTES,
) -> int:
    """Write every unit of `source` to `sink` truncated to `limit` bytes. Returns the unit count."""
    units = read_units(source, mode, max_unit_bytes)
    emitted = 0
    for unit in units:
        sink.write(truncate_unit(unit, limit) + b'\n')
        sink.flush()
        emitted += 1
    return emitted


def run(
    args: Sequence[str],
    source: BinaryIO,
    sink: BinaryIO,
    mode: str = LINE_MODE,
    err: TextIO | None = None,
    max_unit_bytes: int = MAX_UNIT_BYTES,
) -> int:
    """Parse N from `args` and filter `source` into `sink`. Returns the process exit code.

    Configuration errors are reported before any input is read. The first
    over-long unit aborts the run; units emitted before it stay written.
    """
    try:
        limit = parse_limit(args)
        if mode not in MODES:
            raise ConfigurationError(f"unknown mode: {mode!r}")
    except ConfigurationError as e:
        click.echo(f"error: {e}", file=err, err=True)
        return 1

    try:
        truncate_stream(limit, source, sink, mode, max_unit_bytes)
    except UnitTooLongError as e:
        click.echo(f"error: {e}", file=err, err=True)
        return 1
    except OSError as e:
        click.echo(f"error: I/O failure: {e}", file=err, err=True)
        return 1
    return 0
