from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable, Tuple

from dora_metrics.core.schema.metrics import WeeklyCount
from dora_metrics.core.schema.window import DateWindow


def week_start(moment: date | datetime) -> date:
    """Return the Sunday on or before ``moment`` (UTC calendar date)."""
    day = moment.date() if isinstance(moment, datetime) else moment
    # date.weekday() is Monday=0; shift so Sunday=0.
    return day - timedelta(days=(day.weekday() + 1) % 7)


def weekly_trend(
    timestamps: Iterable[datetime], window: DateWindow
) -> Tuple[WeeklyCount, ...]:
    buckets: Counter[date] = Counter(week_start(moment) for moment in timestamps)
    for stride in window.strides():
        buckets.setdefault(week_start(stride), 0)
    return tuple(
        WeeklyCount(week=week, count=buckets[week]) for week in sorted(buckets)
    )
