"""
Relative period enumeration and picker options.

**Conceptual**: A relative period is a named time window such as "Today" or
"Last 7 Days" that is resolved to absolute timestamps at call time (see
frontkit.dates.boundaries). Fixed-lookback members carry their day count as
their value; the calendar-relative members (Today, ThisWeek, ThisMonth) and
the special members (AllTime, Custom) use distinct marker values.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List


class PeriodLengthInDays(IntEnum):
    """Closed set of relative periods understood by the boundary calculator."""
    AllTime = -1
    Custom = 0
    One = 1
    Three = 3
    Seven = 7
    Thirty = 30
    ThisWeek = 77
    ThisMonth = 33
    ThreeMonths = 90
    Today = 11


# Periods whose value is a plain number of days to look back from now
FIXED_LOOKBACK_PERIODS = frozenset({
    PeriodLengthInDays.One,
    PeriodLengthInDays.Three,
    PeriodLengthInDays.Seven,
    PeriodLengthInDays.Thirty,
    PeriodLengthInDays.ThreeMonths,
})


@dataclass(frozen=True)
class PeriodOption:
    """A label/value pair for a period picker."""
    text: str
    value: PeriodLengthInDays


_PERIOD_OPTIONS = (
    PeriodOption("Today", PeriodLengthInDays.Today),
    PeriodOption("Last 24 hours", PeriodLengthInDays.One),
    PeriodOption("Last 3 Days", PeriodLengthInDays.Three),
    PeriodOption("This Week", PeriodLengthInDays.ThisWeek),
    PeriodOption("Last 7 Days", PeriodLengthInDays.Seven),
    PeriodOption("This Month", PeriodLengthInDays.ThisMonth),
    PeriodOption("Last 30 Days", PeriodLengthInDays.Thirty),
    PeriodOption("Last 3 Months", PeriodLengthInDays.ThreeMonths),
    PeriodOption("All Time", PeriodLengthInDays.AllTime),
    PeriodOption("Custom", PeriodLengthInDays.Custom),
)


def get_period_options(exclude_periods: Iterable[PeriodLengthInDays] = ()) -> List[PeriodOption]:
    """
    Return picker options in display order, without the excluded periods.

    Args:
        exclude_periods: Periods to leave out (e.g. Custom when the UI has no
                         date-range control).

    Returns:
        List of PeriodOption, ordered from shortest window to All Time, Custom last.
    """
    excluded = set(exclude_periods)
    return [option for option in _PERIOD_OPTIONS if option.value not in excluded]
