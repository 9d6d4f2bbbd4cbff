import re

import pytest

from periodchart import (
    Alignment,
    Bounds,
    BufferOutput,
    Color,
    Dataset,
    GanttChart,
    GanttChartConfig,
    Interval,
    Terminal,
)

HOUR = 3600


class RecordingOutput:
    """Sink remembering the color requested for each line."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Color | None]] = []

    def writeln(self, message: str, color: Color | None = None) -> None:
        self.calls.append((message, color))


class FixedSpanDataset(Dataset):
    """Dataset whose overall span is supplied rather than derived."""

    def __init__(self, rows, length: Interval):
        super().__init__(rows)
        self._length = length

    def length(self) -> Interval | None:
        return self._length


def bars(dataset: Dataset, **settings) -> list[str]:
    """Render with no margin/gap and return only the bar area of each line."""
    output = BufferOutput()
    config = GanttChartConfig(
        output=output, width=10, gap_size=0, left_margin_size=0, **settings
    )
    GanttChart(config).stroke(dataset)
    label_width = dataset.label_max_length()
    return [line[label_width:] for line in output.lines]


def test_empty_dataset_writes_nothing() -> None:
    output = RecordingOutput()
    GanttChart(GanttChartConfig(output=output)).stroke(Dataset())
    assert output.calls == []


def test_full_span_closed_interval() -> None:
    data = Dataset([("A", Interval(start=0, end=10, bounds=Bounds.INCLUDE_ALL))])
    assert bars(data) == ["[--------]"]


def test_full_span_with_uneven_scale() -> None:
    data = Dataset([("A", Interval(start=0, end=3 * HOUR, bounds=Bounds.INCLUDE_ALL))])

    (line,) = bars(data)

    assert len(line) == 10
    assert line[0] == "[" and line[-1] == "]"
    assert set(line[1:-1]) == {"-"}


def test_bounds_only_change_boundary_glyphs() -> None:
    closed = Dataset([("A", Interval(start=0, end=10, bounds=Bounds.INCLUDE_ALL))])
    opened = Dataset([("A", Interval(start=0, end=10, bounds=Bounds.EXCLUDE_ALL))])

    (closed_line,) = bars(closed)
    (open_line,) = bars(opened)

    assert open_line == "(--------)"
    assert [i for i, (a, b) in enumerate(zip(closed_line, open_line)) if a != b] == [
        0,
        9,
    ]


def test_disjoint_intervals_are_separated_by_fill() -> None:
    data = Dataset([("A", [Interval(start=0, end=3), Interval(start=6, end=10)])])
    assert bars(data) == ["[-)   [--)"]


def test_overlapping_intervals_last_write_wins() -> None:
    data = Dataset(
        [
            ("R", Interval(start=0, end=10)),
            ("X", [Interval(start=2, end=8), Interval(start=5, end=10)]),
        ]
    )

    reference, overlapped = bars(data)

    assert reference == "[--------)"
    assert overlapped == "  [--[---)"
    assert overlapped[2:5] == "[--"
    assert overlapped[5:10] == "[---)"


def test_later_interval_clobbers_earlier_boundary_glyphs() -> None:
    data = Dataset(
        [
            ("R", Interval(start=0, end=10)),
            ("X", [Interval(start=5, end=10), Interval(start=2, end=8)]),
        ]
    )
    assert bars(data)[1] == "  [----)-)"


def test_custom_glyphs() -> None:
    data = Dataset(
        [
            (
                "A",
                [
                    Interval(start=0, end=4),
                    Interval(start=6, end=10, bounds=Bounds.EXCLUDE_ALL),
                ],
            )
        ]
    )

    lines = bars(
        data,
        body_character="=",
        start_included_character="|",
        end_excluded_character=">",
        start_excluded_character="<",
        space_character=".",
    )

    assert lines == ["|==>..<==>"]


def test_degenerate_interval_is_clamped_to_one_column() -> None:
    data = Dataset(
        [
            ("R", Interval(start=0, end=10)),
            ("P", Interval(start=4, end=4, bounds=Bounds.INCLUDE_ALL)),
        ]
    )
    assert bars(data)[1] == "    ]     "


def test_degenerate_interval_can_be_skipped() -> None:
    data = Dataset(
        [
            ("R", Interval(start=0, end=10)),
            ("P", Interval(start=4, end=4, bounds=Bounds.INCLUDE_ALL)),
        ]
    )
    assert bars(data, degenerate="skip")[1] == " " * 10


def test_zero_duration_dataset_does_not_divide_by_zero() -> None:
    data = Dataset([("P", Interval(start=5, end=5, bounds=Bounds.INCLUDE_ALL))])
    assert bars(data) == ["]         "]


def test_intervals_partly_outside_the_span_are_clipped() -> None:
    data = FixedSpanDataset(
        [
            ("A", Interval(start=-5, end=15)),
            ("B", Interval(start=-5, end=3)),
            ("C", Interval(start=7, end=25, bounds=Bounds.INCLUDE_ALL)),
        ],
        length=Interval(start=0, end=10),
    )

    assert bars(data) == ["[--------)", "[-)       ", "       [-]"]


@pytest.mark.parametrize("policy", ["clamp", "skip"])
def test_intervals_wholly_outside_the_span_are_skipped_on_both_sides(
    policy: str,
) -> None:
    data = FixedSpanDataset(
        [
            ("A", Interval(start=20, end=30)),
            ("B", Interval(start=-30, end=-20)),
            ("C", Interval(start=10, end=12)),
            ("D", Interval(start=-2, end=0)),
            ("E", Interval(start=13, end=13, bounds=Bounds.INCLUDE_ALL)),
            ("F", Interval(start=-3, end=-3, bounds=Bounds.INCLUDE_ALL)),
        ],
        length=Interval(start=0, end=10),
    )

    assert bars(data, degenerate=policy) == [" " * 10] * 6


def test_points_on_the_span_edges_follow_the_degenerate_policy() -> None:
    data = Dataset(
        [
            ("S", Interval(start=0, end=0, bounds=Bounds.INCLUDE_ALL)),
            ("E", Interval(start=10, end=10, bounds=Bounds.INCLUDE_ALL)),
        ]
    )

    assert bars(data) == ["]         ", "         ]"]
    assert bars(data, degenerate="skip") == [" " * 10, " " * 10]


def test_line_layout_margin_label_and_gap() -> None:
    output = BufferOutput()
    config = GanttChartConfig(
        output=output,
        width=4,
        gap_size=2,
        left_margin_size=1,
        label_alignment=Alignment.RIGHT,
    )
    data = Dataset(
        [("a", Interval(start=0, end=2)), ("bcd", Interval(start=2, end=4))]
    )

    GanttChart(config).stroke(data)

    assert output.lines == ["   a  [)  ", " bcd    [)"]


def test_lines_does_not_write() -> None:
    output = RecordingOutput()
    chart = GanttChart(GanttChartConfig(output=output, width=4))

    lines = chart.lines(Dataset([("a", Interval(start=0, end=4))]))

    assert lines == [" a [--)"]
    assert output.calls == []


def test_palette_cycles_over_rows() -> None:
    output = RecordingOutput()
    config = GanttChartConfig(output=output, colors=(Color.RED, Color.BLUE))
    data = Dataset.from_items([Interval(start=i, end=i + 1) for i in range(5)])

    GanttChart(config).render(data)

    assert [color for _, color in output.calls] == [
        Color.RED,
        Color.BLUE,
        Color.RED,
        Color.BLUE,
        Color.RED,
    ]


def test_colorless_output_is_colored_output_without_escapes() -> None:
    data = Dataset.from_items(
        [Interval(start=0, end=HOUR), Interval(start=HOUR / 2, end=2 * HOUR)]
    )
    colored = BufferOutput(Terminal.POSIX)
    plain = BufferOutput(Terminal.COLORLESS)
    palette = (Color.GREEN, Color.MAGENTA)

    GanttChart(GanttChartConfig(output=colored, colors=palette)).stroke(data)
    GanttChart(GanttChartConfig(output=plain, colors=palette)).stroke(data)

    assert colored.getvalue() != plain.getvalue()
    assert re.sub(r"\x1b\[\d+m", "", colored.getvalue()) == plain.getvalue()


def test_scale_is_recomputed_per_call() -> None:
    output = BufferOutput()
    chart = GanttChart(GanttChartConfig(output=output, width=4, left_margin_size=0))

    chart.stroke(Dataset([("a", Interval(start=0, end=100))]))
    chart.stroke(
        Dataset([("a", Interval(start=0, end=2)), ("b", Interval(start=2, end=4))])
    )

    assert output.lines == ["a [--)", "a [)  ", "b   [)"]


def test_default_config_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    GanttChart().stroke(Dataset([("A", Interval(start=0, end=1))]))

    out = capsys.readouterr().out
    assert out == " A [" + "-" * 58 + ")\n"
