"""Selection of records by calendar day."""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Protocol, TypeVar

DAY_KEY_LENGTH = 10


class DatedRecord(Protocol):
    """Any record carrying an ISO-8601 day or date-time string."""

    @property
    def timestamp(self) -> object:
        """Return the stored date or date-time value."""


RecordT = TypeVar("RecordT", bound=DatedRecord)


def day_key(day: date) -> str:
    """Return the ``YYYY-MM-DD`` grouping key for a day, ignoring time of day."""
    if isinstance(day, datetime):
        day = day.date()
    return day.isoformat()


def record_day(record: DatedRecord) -> date | None:
    """Return the calendar day of a record, or None when it has no usable date."""
    raw = getattr(record, "timestamp", None)
    if not isinstance(raw, str) or len(raw) < DAY_KEY_LENGTH:
        return None
    prefix = raw[:DAY_KEY_LENGTH]
    try:
        parsed = date.fromisoformat(prefix)
    except ValueError:
        return None
    # Only the extended YYYY-MM-DD form is a grouping key.
    if parsed.isoformat() != prefix:
        return None
    return parsed


def filter_by_day(records: Iterable[RecordT], day: date) -> list[RecordT]:
    """Return the records logged on ``day`` in their original order."""
    target = day_key(day)
    selected = []
    for record in records:
        parsed = record_day(record)
        if parsed is not None and parsed.isoformat() == target:
            selected.append(record)
    return selected
