"""Immutable rendering configuration for Gantt charts."""

import random
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Literal, assert_never

from periodchart.errors import ConfigurationError
from periodchart.output import Color, Output, stdout

Degenerate = Literal["clamp", "skip"]


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    def pad(self, text: str, width: int) -> str:
        match self:
            case Alignment.LEFT:
                return text.ljust(width)
            case Alignment.RIGHT:
                return text.rjust(width)
            case Alignment.CENTER:
                return text.center(width)
            case _:
                assert_never(self)


_GLYPH_FIELDS = (
    "body_character",
    "start_included_character",
    "start_excluded_character",
    "end_included_character",
    "end_excluded_character",
    "space_character",
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, kw_only=True)
class GanttChartConfig:
    """Settings read by ``GanttChart``.

    Attributes:
        output: Sink receiving one line per dataset row
        width: Number of columns of the bar area
        gap_size: Spaces between the label and the bar area
        left_margin_size: Spaces before the label
        label_alignment: How labels are padded to the longest label
        colors: Palette cycled across rows
        degenerate: What to do with intervals mapping to no column at all,
            ``"clamp"`` draws them on one column, ``"skip"`` leaves them out
    """

    output: Output = field(default_factory=stdout)
    width: int = 60
    gap_size: int = 1
    left_margin_size: int = 1
    label_alignment: Alignment = Alignment.LEFT
    colors: tuple[Color, ...] = (Color.DEFAULT,)
    body_character: str = "-"
    start_included_character: str = "["
    start_excluded_character: str = "("
    end_included_character: str = "]"
    end_excluded_character: str = ")"
    space_character: str = " "
    degenerate: Degenerate = "clamp"

    def __post_init__(self) -> None:
        colors = self.colors
        if isinstance(colors, (str, Color)) or not isinstance(colors, Iterable):
            raise ConfigurationError(
                f"Chart palette must be an iterable of Color members.\n"
                f"Got {type(colors).__name__!r}: {colors!r}\n"
                f"Hint: wrap a single color, colors=(Color.RED,)"
            )
        # colors is stored as a tuple whatever iterable was given
        object.__setattr__(self, "colors", tuple(colors))

        if not callable(getattr(self.output, "writeln", None)):
            raise ConfigurationError(
                f"Chart output must provide writeln(message, color).\n"
                f"Got {type(self.output).__name__!r}"
            )
        if not _is_int(self.width) or self.width < 1:
            raise ConfigurationError(
                f"Chart width must be a positive integer, got {self.width!r}"
            )
        if not _is_int(self.gap_size) or self.gap_size < 0:
            raise ConfigurationError(
                f"Gap size must be an integer >= 0, got {self.gap_size!r}"
            )
        if not _is_int(self.left_margin_size) or self.left_margin_size < 0:
            raise ConfigurationError(
                f"Left margin size must be an integer >= 0, "
                f"got {self.left_margin_size!r}"
            )
        if not isinstance(self.label_alignment, Alignment):
            raise ConfigurationError(
                f"Label alignment must be an Alignment member, "
                f"got {self.label_alignment!r}"
            )
        if not self.colors:
            raise ConfigurationError("Chart palette requires at least one color")
        for color in self.colors:
            if not isinstance(color, Color):
                raise ConfigurationError(
                    f"Palette entries must be Color members, got {color!r}"
                )
        for name in _GLYPH_FIELDS:
            glyph = getattr(self, name)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ConfigurationError(
                    f"{name} must be a single character, got {glyph!r}"
                )
        if self.degenerate not in ("clamp", "skip"):
            raise ConfigurationError(
                f"degenerate must be 'clamp' or 'skip', got {self.degenerate!r}"
            )

    @classmethod
    def create_from_random(
        cls, seed: Any = None, **settings: Any
    ) -> "GanttChartConfig":
        """Return a config whose palette is every color in a random order."""
        skipped = (Color.RESET, Color.DEFAULT, Color.BLACK)
        palette = [color for color in Color if color not in skipped]
        random.Random(seed).shuffle(palette)
        return cls(colors=tuple(palette), **settings)

    def with_output(self, output: Output) -> "GanttChartConfig":
        return replace(self, output=output)

    def with_width(self, width: int) -> "GanttChartConfig":
        return replace(self, width=width)

    def with_gap_size(self, gap_size: int) -> "GanttChartConfig":
        return replace(self, gap_size=gap_size)

    def with_left_margin_size(self, left_margin_size: int) -> "GanttChartConfig":
        return replace(self, left_margin_size=left_margin_size)

    def with_label_alignment(self, alignment: Alignment) -> "GanttChartConfig":
        return replace(self, label_alignment=alignment)

    def with_colors(self, *colors: Color | Iterable[Color]) -> "GanttChartConfig":
        palette: list[Color] = []
        for color in colors:
            if isinstance(color, Color):
                palette.append(color)
            else:
                palette.extend(color)
        return replace(self, colors=tuple(palette))

    def with_glyphs(self, **glyphs: str) -> "GanttChartConfig":
        """Replace any of the six glyphs, e.g. ``with_glyphs(body_character="=")``."""
        unknown = set(glyphs) - set(_GLYPH_FIELDS)
        if unknown:
            raise ConfigurationError(
                f"Unknown glyph setting(s): {', '.join(sorted(unknown))}\n"
                f"Valid: {', '.join(_GLYPH_FIELDS)}"
            )
        return replace(self, **glyphs)

    def with_degenerate(self, policy: Degenerate) -> "GanttChartConfig":
        return replace(self, degenerate=policy)
