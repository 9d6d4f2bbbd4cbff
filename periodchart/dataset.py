"""Labeled rows of intervals, the input of a chart."""

from collections.abc import Iterable, Iterator

from periodchart.interval import Interval, span
from periodchart.labels import LabelGenerator, LatinLetter

Row = tuple[str, tuple[Interval, ...]]


class Dataset:
    """Ordered collection of ``(label, intervals)`` rows.

    Row order is insertion order and is the order a chart draws them in.
    Intervals keep the order they were given in, which matters because later
    intervals of a row are drawn over earlier ones.
    """

    def __init__(self, rows: Iterable[tuple[str, Interval | Iterable[Interval]]] = ()):
        self._rows: list[Row] = []
        for label, intervals in rows:
            self.append(label, intervals)

    @classmethod
    def from_items(
        cls,
        items: Iterable[Interval | Iterable[Interval]],
        labels: LabelGenerator | None = None,
    ) -> "Dataset":
        """Build a dataset, naming each item with a label generator.

        Example:
            >>> data = Dataset.from_items([Interval(start=0, end=5)])
            >>> data.labels()
            ['A']
        """
        items = list(items)
        generator = labels if labels is not None else LatinLetter()
        return cls(zip(generator.generate(len(items)), items))

    def append(self, label: str, intervals: Interval | Iterable[Interval]) -> None:
        if isinstance(intervals, Interval):
            row_intervals: tuple[Interval, ...] = (intervals,)
        else:
            row_intervals = tuple(intervals)
        for interval in row_intervals:
            if not isinstance(interval, Interval):
                raise TypeError(
                    f"Dataset rows only hold Interval values.\n"
                    f"Got {type(interval).__name__!r} in row {label!r}"
                )
        self._rows.append((str(label), row_intervals))

    def with_labels(self, labels: LabelGenerator) -> "Dataset":
        """Return a copy of this dataset with rows renamed by ``labels``."""
        return Dataset(zip(labels.generate(len(self._rows)), self.items()))

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def labels(self) -> list[str]:
        return [label for label, _ in self._rows]

    def items(self) -> list[tuple[Interval, ...]]:
        return [intervals for _, intervals in self._rows]

    def length(self) -> Interval | None:
        """Overall span covering every interval of every row, or None."""
        return span(interval for _, intervals in self._rows for interval in intervals)

    def label_max_length(self) -> int:
        return max((len(label) for label, _ in self._rows), default=0)
