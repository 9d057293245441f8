class FilterError(Exception):
    """Base class for errors raised by the truncating filter."""
    pass


class ConfigurationError(FilterError):
    """Raised when the limit argument or mode is missing or invalid."""
    pass


class UnitTooLongError(FilterError):
    """Raised when an input unit does not fit in the unit buffer."""

    def __init__(self, index: int, limit: int):
        self.index = index
        self.limit = limit
        super().__init__(f"unit {index} is longer than {limit} bytes")
