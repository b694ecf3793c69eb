from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator

from dora_metrics.core.exceptions import InvalidDateRangeError

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class DateWindow:
    """Inclusive calendar-date range; ``to_date`` covers its whole day (UTC)."""

    from_date: date
    to_date: date

    def __post_init__(self) -> None:
        if self.from_date > self.to_date:
            raise InvalidDateRangeError(
                f"from date {self.from_date.isoformat()} is after "
                f"to date {self.to_date.isoformat()}"
            )

    @classmethod
    def parse(cls, from_value: str, to_value: str) -> "DateWindow":
        return cls(
            from_date=_parse_date(from_value, "from"),
            to_date=_parse_date(to_value, "to"),
        )

    @property
    def start(self) -> datetime:
        return datetime.combine(self.from_date, time.min, tzinfo=timezone.utc)

    @property
    def end(self) -> datetime:
        return datetime.combine(self.to_date, time.max, tzinfo=timezone.utc)

    @property
    def period_days(self) -> int:
        return max((self.to_date - self.from_date).days, 1)

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def strides(self) -> Iterator[date]:
        current = self.from_date
        while current <= self.to_date:
            yield current
            current += timedelta(days=7)


def _parse_date(value: str, label: str) -> date:
    if not value:
        raise InvalidDateRangeError(f"Missing {label} date")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as error:
        raise InvalidDateRangeError(
            f"Invalid {label} date {value!r}, expected YYYY-MM-DD"
        ) from error
