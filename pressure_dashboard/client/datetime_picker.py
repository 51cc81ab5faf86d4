"""Composite date + 12-hour clock picker."""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

AM = "AM"
PM = "PM"
HOURS = list(range(1, 13))


def to_24h(hour: int, period: str) -> int:
    if not 1 <= hour <= 12:
        raise ValueError(f"hour must be between 1 and 12, got {hour}")
    if period not in (AM, PM):
        raise ValueError(f"period must be AM or PM, got {period!r}")
    if period == AM:
        return 0 if hour == 12 else hour
    return 12 if hour == 12 else hour + 12


def to_12h(hour: int) -> tuple:
    """24h hour -> (hour 1..12, period)."""
    period = PM if hour >= 12 else AM
    hour12 = hour % 12
    return (12 if hour12 == 0 else hour12), period


class DateTimePicker:
    def __init__(self, value: datetime, period: Optional[str] = None):
        self.value = value
        self.period = period or to_12h(value.hour)[1]

    @property
    def hour12(self) -> int:
        return to_12h(self.value.hour)[0]

    def select_date(self, day: date) -> datetime:
        """Move to another calendar day, keeping the time of day."""
        self.value = self.value.replace(year=day.year, month=day.month, day=day.day)
        return self.value

    def select_hour(self, hour: int) -> datetime:
        """Set the hour in the current AM/PM period; minutes are zeroed."""
        self.value = self.value.replace(
            hour=to_24h(int(hour), self.period), minute=0, second=0, microsecond=0
        )
        return self.value

    def select_period(self, period: str) -> datetime:
        self.period = period
        return self.select_hour(self.hour12)
