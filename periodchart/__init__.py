import logging

from .bounds import Bounds
from .chart import GanttChart
from .config import Alignment, GanttChartConfig
from .dataset import Dataset
from .errors import ConfigurationError
from .interval import Interval, span, split
from .labels import DecimalNumber, LabelGenerator, LatinLetter, LetterCase, RomanNumber
from .output import BufferOutput, Color, Output, StreamOutput, Terminal

# The library emits debug records only; applications decide where they go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bounds",
    "Interval",
    "span",
    "split",
    "Dataset",
    "LabelGenerator",
    "LatinLetter",
    "DecimalNumber",
    "RomanNumber",
    "LetterCase",
    "Color",
    "Terminal",
    "Output",
    "StreamOutput",
    "BufferOutput",
    "Alignment",
    "GanttChartConfig",
    "GanttChart",
    "ConfigurationError",
]
