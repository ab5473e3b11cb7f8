"""Time quantities and their pluralized text form."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Mapping


class TimeUnit(Enum):
    SECONDS = 1
    MINUTES = 60
    HOURS = 60 * 60
    DAYS = 24 * 60 * 60

    @property
    def seconds(self) -> int:
        return self.value


ENGLISH_LABELS: dict[TimeUnit, tuple[str, str]] = {
    TimeUnit.SECONDS: ("second", "seconds"),
    TimeUnit.MINUTES: ("minute", "minutes"),
    TimeUnit.HOURS: ("hour", "hours"),
    TimeUnit.DAYS: ("day", "days"),
}


@dataclass(frozen=True, slots=True)
class Duration:
    """A signed amount of a single time unit."""

    amount: int
    unit: TimeUnit

    @classmethod
    def create_with_suitable_unit(cls, amount: int, unit: TimeUnit) -> "Duration":
        """Express ``amount`` of ``unit`` in the largest unit that keeps it at least 1.

        The conversion truncates toward zero, so 90 seconds become 1 minute.
        """

        total_seconds = amount * unit.seconds
        for candidate in (TimeUnit.DAYS, TimeUnit.HOURS, TimeUnit.MINUTES):
            converted = int(total_seconds / candidate.seconds)
            if abs(converted) >= 1:
                return cls(converted, candidate)
        return cls(total_seconds, TimeUnit.SECONDS)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls.create_with_suitable_unit(int(delta.total_seconds()), TimeUnit.SECONDS)


def format_duration(
    duration: Duration,
    labels: Mapping[TimeUnit, tuple[str, str]] | None = None,
) -> str:
    """Render ``duration`` as ``"<amount> <unit>"``.

    The label is singular only when the absolute amount is 1; the amount is
    printed with its sign.
    """

    singular, plural = (labels or ENGLISH_LABELS)[duration.unit]
    label = singular if abs(duration.amount) == 1 else plural
    return f"{duration.amount} {label}"


__all__ = ["Duration", "ENGLISH_LABELS", "TimeUnit", "format_duration"]
