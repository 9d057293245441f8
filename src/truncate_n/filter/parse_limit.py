import re
from typing import Sequence

from .errors import ConfigurationError

_DECIMAL = re.compile(r'[+-]?[0-9]+')


def parse_limit(args: Sequence[str]) -> int:
    """Parse the single non-negative base-10 limit argument."""
    if len(args) != 1:
        raise ConfigurationError(f"expected exactly one argument N, got {len(args)}")
    value = args[0]
    if not _DECIMAL.fullmatch(value):
        raise ConfigurationError(f"N is not a base-10 integer: {value!r}")
    limit = int(value)
    if limit < 0:
        raise ConfigurationError(f"N must be non-negative: {value}")
    return limit
