"""Render a dataset as a Gantt bar chart on a fixed-width character grid."""

import logging
import math

from periodchart.config import GanttChartConfig
from periodchart.dataset import Dataset
from periodchart.interval import Interval

logger = logging.getLogger(__name__)


class GanttChart:
    """Draw each dataset row as a line of glyphs on a shared time scale.

    A chart configured with the defaults renders like this::

        A       [--------)
        B                    [--)
        C                            [-----)
        D              [---------------)

    Intervals of a row are drawn in order onto the same line, later ones
    overwriting the glyphs of earlier ones where they overlap.

    Intervals partly outside the dataset span are clipped to the grid and
    intervals wholly outside it are skipped, on either side. An interval
    covering no column at all is either drawn on a single column or skipped,
    following ``config.degenerate``.
    """

    def __init__(self, config: GanttChartConfig | None = None):
        self.config: GanttChartConfig = (
            config if config is not None else GanttChartConfig()
        )
        self._origin: float = 0
        self._scale: float = 1

    def stroke(self, dataset: Dataset) -> None:
        """Write one line per dataset row to the configured output."""
        colors = self.config.colors
        output = self.config.output
        for offset, line in enumerate(self.lines(dataset)):
            output.writeln(line, colors[offset % len(colors)])

    render = stroke

    def lines(self, dataset: Dataset) -> list[str]:
        """Return the uncolored chart lines without writing them."""
        self._set_scale(dataset)
        config = self.config
        margin = " " * config.left_margin_size
        gap = " " * config.gap_size
        label_width = dataset.label_max_length()

        return [
            margin
            + config.label_alignment.pad(label, label_width)
            + gap
            + self._row_to_line(intervals)
            for label, intervals in dataset
        ]

    def _set_scale(self, dataset: Dataset) -> None:
        self._origin = 0
        self._scale = 1
        overall = dataset.length()
        if overall is None:
            return
        self._origin = overall.start
        if overall.duration > 0:
            self._scale = self.config.width / overall.duration
        logger.debug(
            "Chart scale: origin=%s, %s columns per second", self._origin, self._scale
        )

    def _row_to_line(self, intervals: tuple[Interval, ...]) -> str:
        line = [self.config.space_character] * self.config.width
        for interval in intervals:
            self._draw(line, interval)
        return "".join(line)

    def _columns(self, interval: Interval) -> tuple[int, int] | None:
        """Map an interval onto ``[start, end)`` grid columns, or None to skip."""
        width = self.config.width
        start = math.floor((interval.start - self._origin) * self._scale)
        end = math.ceil((interval.end - self._origin) * self._scale)

        # Points on the span edges (start == end == 0 or width) are inside
        if (start < 0 and end <= 0) or (start >= width and end > width):
            logger.debug(
                "Skipping interval %s, columns [%d, %d) are outside the grid",
                interval,
                start,
                end,
            )
            return None

        if end <= start:
            if self.config.degenerate == "skip":
                logger.debug("Skipping interval %s, it covers no column", interval)
                return None
            start = min(max(start, 0), width - 1)
            return start, start + 1

        clipped_start = max(start, 0)
        clipped_end = min(end, width)
        if (clipped_start, clipped_end) != (start, end):
            logger.debug(
                "Interval %s maps to columns [%d, %d), clipped to [%d, %d)",
                interval,
                start,
                end,
                clipped_start,
                clipped_end,
            )
        return clipped_start, clipped_end

    def _draw(self, line: list[str], interval: Interval) -> None:
        columns = self._columns(interval)
        if columns is None:
            return
        start, end = columns
        config = self.config

        line[start:end] = [config.body_character] * (end - start)
        line[start] = (
            config.start_included_character
            if interval.bounds.is_start_included()
            else config.start_excluded_character
        )
        line[end - 1] = (
            config.end_included_character
            if interval.bounds.is_end_included()
            else config.end_excluded_character
        )
