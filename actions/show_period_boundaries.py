#!/usr/bin/env python3
"""
Print the absolute boundaries of relative periods.

**Purpose**: Quick check of what "Today", "This Week", "Last 30 Days" etc.
resolve to on this machine (local timezone), optionally at a fixed "now".

**Usage**:
    From project root:
    ```bash
    python actions/show_period_boundaries.py
    python actions/show_period_boundaries.py --period ThisWeek
    python actions/show_period_boundaries.py --now "2025-10-15 14:30" --locale bg-BG
    ```

**Output**: One row per period with the start/end in epoch milliseconds and
as localized date-times.
"""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

# Add project root to Python path so we can import frontkit modules
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from frontkit.dates.boundaries import calculate_period_boundaries
from frontkit.dates.formatters import format_utc_date_to_local_date_string, parse_valid_date
from frontkit.dates.periods import PeriodLengthInDays, get_period_options
from frontkit.utils.time import FrozenClock, RealClock


def build_table(periods, clock, locale):
    """Resolve each period and collect the rows for display."""
    rows = []
    for option in periods:
        boundaries = calculate_period_boundaries(option.value, clock=clock)
        rows.append({
            "period": option.text,
            "start_ms": boundaries.start,
            "end_ms": boundaries.end,
            "start": format_utc_date_to_local_date_string(boundaries.start, "fullDateTime", locale=locale),
            "end": format_utc_date_to_local_date_string(boundaries.end, "fullDateTime", locale=locale),
        })
    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(
        description="Show start/end timestamps of relative periods.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--period",
        type=str,
        choices=[member.name for member in PeriodLengthInDays],
        default=None,
        help="Only show this period. Default: all periods.",
    )

    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Freeze 'now' to this date/time (local time unless an offset is given). Default: real clock.",
    )

    parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Locale for the readable columns (e.g. en, bg-BG). Default: FRONTKIT_DEFAULT_LOCALE or en.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    clock = RealClock()
    if args.now:
        frozen = parse_valid_date(args.now)
        if frozen is None:
            print(f"Error: could not parse --now value: {args.now}")
            sys.exit(1)
        clock = FrozenClock(frozen)

    options = get_period_options()
    if args.period:
        options = [option for option in options if option.value.name == args.period]

    table = build_table(options, clock, args.locale)

    print("=" * 80)
    print(f"Period boundaries at {format_utc_date_to_local_date_string(clock.now(), 'fullDateTime', locale=args.locale)}")
    print("=" * 80)
    print(table.to_string(index=False))


if __name__ == "__main__":
    main()
