"""
Clock abstraction and local wall-time helpers.

Code that needs "now" asks a Clock instead of calling datetime.now() directly.
Production code uses RealClock; tests pass a FrozenClock so period boundaries
and formatted dates are reproducible.

Local calendar arithmetic (midnight, first day of month) is done on naive
local wall time and converted back with the host timezone rules, which keeps
DST transition days exact.
"""

from datetime import datetime, timezone
from typing import Optional, Protocol


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Usage**: Accept an optional Clock in any function that reads the
    current time, and default to RealClock when none is given.

    **Example**:
        def boundaries(clock: Optional[Clock] = None):
            now = (clock or RealClock()).now()

        boundaries(FrozenClock(datetime(2025, 10, 15, 14, 30, tzinfo=timezone.utc)))
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class RealClock:
    """Clock backed by the system time (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that always returns the same instant.

    Naive datetimes are accepted and treated as local wall time, matching how
    the rest of the package interprets naive values.
    """

    def __init__(self, fixed_now: datetime):
        self._fixed_now = fixed_now if fixed_now.tzinfo is not None else fixed_now.astimezone()

    def now(self) -> datetime:
        return self._fixed_now


def get_clock(clock: Optional[Clock] = None) -> Clock:
    """Return the given clock, or a RealClock when none is provided."""
    return clock if clock is not None else RealClock()


def to_epoch_ms(moment: datetime) -> int:
    """
    Convert a datetime to integer Unix milliseconds.

    Naive datetimes are interpreted as local wall time (Python's convention
    for datetime.timestamp()).
    """
    return round(moment.timestamp() * 1000)


def to_local_wall_time(moment: datetime) -> datetime:
    """
    Convert an aware datetime to a naive datetime in the host's local timezone.

    Naive input is assumed to already be local wall time and returned as is.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def local_midnight(moment: datetime) -> datetime:
    """Return naive local midnight of the local calendar day containing moment."""
    return to_local_wall_time(moment).replace(hour=0, minute=0, second=0, microsecond=0)
