"""Request timeouts expressed in whole milliseconds."""

from __future__ import annotations

from datetime import timedelta

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_MICROSECONDS_PER_MS = 1000


class TimeoutUnderflowError(ArithmeticError):
    """Raised when a timeout is below the smallest value the transport accepts."""


def _truncate_to_ms(duration: timedelta) -> int:
    """Convert a timedelta to milliseconds, truncating toward zero."""
    micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
    whole = abs(micros) // _MICROSECONDS_PER_MS
    return -whole if micros < 0 else whole


class Timeout:
    """A timeout given either as milliseconds or as a timedelta."""

    __slots__ = ("ms",)

    def __init__(self, duration: int | timedelta) -> None:
        if isinstance(duration, timedelta):
            self.ms = _truncate_to_ms(duration)
        elif isinstance(duration, int) and not isinstance(duration, bool):
            self.ms = duration
        else:
            raise TypeError(
                f"{type(self).__name__} expects an int or timedelta, got {type(duration).__name__}"
            )

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against the transport's range."""
        if self.ms > LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < LONG_MIN:
            raise TimeoutUnderflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return self.ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeout):
            return NotImplemented
        return type(self) is type(other) and self.ms == other.ms

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.ms))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ms})"


class ConnectTimeout(Timeout):
    """Timeout for establishing the connection only."""

    __slots__ = ()