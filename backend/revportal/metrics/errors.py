"""Typed errors raised by the performance metrics calculator."""


class MetricsError(Exception):
    """Base class for all metrics calculator errors."""


class InvalidInputError(MetricsError, ValueError):
    """A value is non-numeric, non-finite, or negative where it must not be."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}: {reason} (got {value!r})")


class DivisionByZeroError(MetricsError, ZeroDivisionError):
    """A comp-set denominator is zero, so the index ratio is undefined."""

    def __init__(self, index: str, denominator: str) -> None:
        self.index = index
        self.denominator = denominator
        super().__init__(f"Cannot compute {index.upper()}: {denominator} is 0")
