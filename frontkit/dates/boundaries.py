"""
Period boundary calculator.

**Conceptual**: Converts a relative period (PeriodLengthInDays) into a pair of
absolute Unix timestamps in milliseconds, with the window always ending "now".

**Rules**:
  - Fixed lookback (One, Three, Seven, Thirty, ThreeMonths):
    start = now - N days.
  - Today: start = local midnight of the current day.
  - ThisWeek: start = local midnight of the most recent Monday
    (Sunday belongs to the week that started six days earlier).
  - ThisMonth: start = local midnight of the 1st of the month.
  - Custom: start = end = now (the caller overrides both from a date control).
  - AllTime, and anything that is not a known period: start = 0.

The function is total: it never raises, whatever it is given.

**Local calendar**: Calendar-relative starts are computed on naive local wall
time and converted with datetime.timestamp(), so on DST transition days the
start is still exactly local midnight rather than "now minus 24h multiples".
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

from frontkit.dates.periods import FIXED_LOOKBACK_PERIODS, PeriodLengthInDays
from frontkit.utils.time import Clock, get_clock, local_midnight, to_epoch_ms

MS_PER_DAY = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class PeriodBoundaries:
    """
    Absolute window for a relative period.

    Attributes:
        start: Window start, Unix epoch milliseconds.
        end: Window end ("now"), Unix epoch milliseconds.
    """
    start: int
    end: int


def _coerce_period(fixed_period: Any) -> PeriodLengthInDays:
    """Map arbitrary input onto the enumeration, defaulting to AllTime."""
    if isinstance(fixed_period, bool):
        return PeriodLengthInDays.AllTime
    try:
        return PeriodLengthInDays(fixed_period)
    except (ValueError, TypeError):
        return PeriodLengthInDays.AllTime


def calculate_period_boundaries(
    fixed_period: Any,
    clock: Optional[Clock] = None,
) -> PeriodBoundaries:
    """
    Resolve a relative period to start/end timestamps in milliseconds.

    Args:
        fixed_period: A PeriodLengthInDays member (or its int value). Unknown
                      values fall back to AllTime.
        clock: Time source; defaults to the system clock.

    Returns:
        PeriodBoundaries with integer millisecond timestamps.

    Example:
        >>> b = calculate_period_boundaries(PeriodLengthInDays.Seven)
        >>> b.end - b.start
        604800000
    """
    period = _coerce_period(fixed_period)
    now = get_clock(clock).now()
    now_ms = to_epoch_ms(now)

    if period in FIXED_LOOKBACK_PERIODS:
        return PeriodBoundaries(start=now_ms - int(period) * MS_PER_DAY, end=now_ms)

    if period == PeriodLengthInDays.Today:
        return PeriodBoundaries(start=to_epoch_ms(local_midnight(now)), end=now_ms)

    if period == PeriodLengthInDays.ThisWeek:
        midnight = local_midnight(now)
        monday = midnight - timedelta(days=midnight.weekday())
        return PeriodBoundaries(start=to_epoch_ms(monday), end=now_ms)

    if period == PeriodLengthInDays.ThisMonth:
        first_of_month = local_midnight(now).replace(day=1)
        return PeriodBoundaries(start=to_epoch_ms(first_of_month), end=now_ms)

    if period == PeriodLengthInDays.Custom:
        return PeriodBoundaries(start=now_ms, end=now_ms)

    return PeriodBoundaries(start=0, end=now_ms)
