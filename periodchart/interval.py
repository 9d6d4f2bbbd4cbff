from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from periodchart.bounds import Bounds


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: float
    end: float
    bounds: Bounds = Bounds.INCLUDE_START_EXCLUDE_END

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __str__(self) -> str:
        """Human-friendly string in interval notation, e.g. ``[0, 10)``."""
        notation = self.bounds.value
        return f"{notation[0]}{self.start}, {self.end}{notation[1]}"

    @property
    def duration(self) -> float:
        return self.end - self.start

    @classmethod
    def from_datetimes(
        cls,
        start: datetime,
        end: datetime,
        bounds: Bounds = Bounds.INCLUDE_START_EXCLUDE_END,
    ) -> "Interval":
        """Build an interval from timezone-aware datetimes.

        Raises:
            TypeError: If either datetime is naive
        """
        for edge, value in (("start", start), ("end", end)):
            if value.tzinfo is None:
                raise TypeError(
                    f"Interval {edge} must be a timezone-aware datetime.\n"
                    f"Got naive datetime: {value!r}\n"
                    f"Hint: Add timezone info:\n"
                    f"  dt = datetime(..., tzinfo=timezone.utc)"
                )
        return cls(start=start.timestamp(), end=end.timestamp(), bounds=bounds)


def span(intervals: Iterable[Interval]) -> Interval | None:
    """Return the smallest interval covering every given interval.

    The start endpoint semantics come from the earliest-starting interval and
    the end semantics from the latest-ending one. Returns None for no input.
    """
    earliest: Interval | None = None
    latest: Interval | None = None
    for interval in intervals:
        if earliest is None or interval.start < earliest.start:
            earliest = interval
        if latest is None or interval.end > latest.end:
            latest = interval

    if earliest is None or latest is None:
        return None

    bounds = earliest.bounds.replace_end(latest.bounds)
    return Interval(start=earliest.start, end=latest.end, bounds=bounds)


def split(interval: Interval, step: timedelta | relativedelta) -> Iterator[Interval]:
    """Split an interval forward into consecutive chunks of ``step``.

    Steps are applied in UTC, so calendar steps like ``relativedelta(months=1)``
    land on calendar boundaries. The last chunk is truncated to the interval
    end. Inner cut points are start-included/end-excluded; the outer
    endpoints keep the bounds of the source interval.

    Example:
        >>> hours = list(split(Interval(start=0, end=7200), timedelta(hours=1)))
        >>> [(chunk.start, chunk.end) for chunk in hours]
        [(0, 3600.0), (3600.0, 7200)]
    """
    cursor = datetime.fromtimestamp(interval.start, tz=timezone.utc)
    if cursor + step <= cursor:
        raise ValueError(
            f"split() requires a step that moves forward in time.\n"
            f"Got: {step!r}"
        )

    current = interval.start
    while current < interval.end:
        cursor = cursor + step
        nxt = min(cursor.timestamp(), interval.end)
        chunk_bounds = Bounds.INCLUDE_START_EXCLUDE_END
        if current == interval.start:
            chunk_bounds = chunk_bounds.replace_start(interval.bounds)
        if nxt == interval.end:
            chunk_bounds = chunk_bounds.replace_end(interval.bounds)
        yield replace(interval, start=current, end=nxt, bounds=chunk_bounds)
        current = nxt
