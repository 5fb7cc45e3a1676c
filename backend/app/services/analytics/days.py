"""
Calendar-day helpers shared by the summary and consistency views.
"""
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterable, List, Optional, Sequence

from app.services.analytics.adapter import to_calendar_day

ONE_DAY = timedelta(days=1)


def evaluation_day(now: datetime, tz: tzinfo = timezone.utc) -> date:
    """The "today" used for one analytics call."""
    return to_calendar_day(now, tz)


def distinct_days(
    timestamps: Iterable[Optional[datetime]],
    tz: tzinfo = timezone.utc
) -> List[date]:
    """Distinct calendar days, ascending. Missing timestamps are skipped."""
    days = {to_calendar_day(ts, tz) for ts in timestamps if ts is not None}
    return sorted(days)


def running_streaks(days: Sequence[date]) -> List[int]:
    """
    Streak length ending at each day of an ascending distinct sequence.

    A day one calendar day after its predecessor extends the run,
    any other gap starts a new run at 1.
    """
    streaks: List[int] = []
    for i, day in enumerate(days):
        if i > 0 and day - days[i - 1] == ONE_DAY:
            streaks.append(streaks[-1] + 1)
        else:
            streaks.append(1)
    return streaks


def current_streak(days: Sequence[date], today: date) -> int:
    """
    Length of the run ending on the latest active day, provided that
    day is today or yesterday; 0 otherwise.
    """
    if not days:
        return 0

    last_day = days[-1]
    if last_day != today and last_day != today - ONE_DAY:
        return 0

    return running_streaks(days)[-1]
