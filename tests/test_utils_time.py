"""
Tests for frontkit/utils/time.py

These tests verify the clock abstraction and the local wall-time helpers.
"""

import time
from datetime import datetime, timedelta, timezone

from frontkit.utils.time import (
    FrozenClock,
    RealClock,
    get_clock,
    local_midnight,
    to_epoch_ms,
    to_local_wall_time,
)

SOFIA_TZ = "EET-2EEST,M3.5.0/3,M10.5.0/4"


def test_real_clock_returns_current_utc_time():
    """RealClock.now() is timezone-aware UTC and close to the system time."""
    before = datetime.now(timezone.utc)
    now = RealClock().now()
    after = datetime.now(timezone.utc)

    assert before <= now <= after
    assert now.tzinfo == timezone.utc


def test_real_clock_advances():
    """Successive RealClock readings move forward."""
    clock = RealClock()
    first = clock.now()
    time.sleep(0.01)
    assert clock.now() > first


def test_frozen_clock_returns_fixed_time():
    """FrozenClock always answers with the configured instant."""
    fixed = datetime(2025, 10, 15, 14, 30, tzinfo=timezone.utc)
    clock = FrozenClock(fixed)

    for _ in range(3):
        assert clock.now() == fixed


def test_frozen_clock_makes_naive_time_aware(local_tz):
    """Naive input is interpreted as local wall time."""
    local_tz(SOFIA_TZ)
    clock = FrozenClock(datetime(2025, 10, 15, 17, 30))

    assert clock.now().tzinfo is not None
    assert clock.now() == datetime(2025, 10, 15, 14, 30, tzinfo=timezone.utc)


def test_get_clock_defaults_to_real_clock():
    """get_clock() returns the given clock or a RealClock."""
    frozen = FrozenClock(datetime(2020, 1, 1, tzinfo=timezone.utc))
    assert get_clock(frozen) is frozen
    assert isinstance(get_clock(), RealClock)


def test_to_epoch_ms():
    """Aware datetimes convert to integer milliseconds."""
    assert to_epoch_ms(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0
    assert to_epoch_ms(datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)) == 1500
    assert isinstance(to_epoch_ms(datetime.now(timezone.utc)), int)


def test_to_local_wall_time(local_tz):
    """Aware datetimes are converted to naive local time; naive ones pass through."""
    local_tz(SOFIA_TZ)
    summer = datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc)
    winter = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    assert to_local_wall_time(summer) == datetime(2025, 7, 1, 15, 0)
    assert to_local_wall_time(winter) == datetime(2025, 1, 1, 14, 0)

    naive = datetime(2025, 1, 1, 9, 0)
    assert to_local_wall_time(naive) is naive


def test_local_midnight_uses_local_calendar_day(local_tz):
    """22:30 UTC is already the next day in Sofia."""
    local_tz(SOFIA_TZ)
    moment = datetime(2025, 10, 15, 22, 30, tzinfo=timezone.utc)

    midnight = local_midnight(moment)

    assert midnight == datetime(2025, 10, 16)
    assert moment.astimezone() - midnight.astimezone() == timedelta(hours=1, minutes=30)
