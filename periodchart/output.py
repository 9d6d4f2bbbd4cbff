"""Line sinks for rendered charts, with optional ANSI coloring."""

import os
import sys
from enum import Enum
from typing import Protocol, TextIO, runtime_checkable

from typing_extensions import override


class Color(Enum):
    RESET = "0"
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"
    DEFAULT = ""

    def posix(self) -> str:
        """ANSI SGR escape selecting this color."""
        return f"\033[{self.value}m"


class Terminal(Enum):
    POSIX = "posix"
    COLORLESS = "colorless"

    @classmethod
    def detect(cls, stream: TextIO) -> "Terminal":
        """Pick POSIX coloring for interactive streams unless NO_COLOR is set."""
        if os.environ.get("NO_COLOR"):
            return cls.COLORLESS
        isatty = getattr(stream, "isatty", None)
        if isatty is None or not isatty():
            return cls.COLORLESS
        return cls.POSIX

    def colorize(self, message: str, color: Color | None) -> str:
        if (
            self is Terminal.COLORLESS
            or color is None
            or color in (Color.DEFAULT, Color.RESET)
            or not message
        ):
            return message
        return f"{color.posix()}{message}{Color.RESET.posix()}"


@runtime_checkable
class Output(Protocol):
    def writeln(self, message: str, color: Color | None = None) -> None: ...


class StreamOutput(Output):
    """Write lines to a text stream.

    Args:
        stream: Any object with a ``write(str)`` method (file, StringIO, ...)
        terminal: Coloring mode; detected from the stream when omitted
    """

    def __init__(self, stream: TextIO, terminal: Terminal | None = None):
        if not callable(getattr(stream, "write", None)):
            raise TypeError(
                f"StreamOutput requires a writable text stream.\n"
                f"Got {type(stream).__name__!r}: {stream!r}"
            )
        self.stream: TextIO = stream
        self.terminal: Terminal = (
            terminal if terminal is not None else Terminal.detect(stream)
        )

    @override
    def writeln(self, message: str, color: Color | None = None) -> None:
        self.stream.write(self.terminal.colorize(message, color) + "\n")
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()


class BufferOutput(Output):
    """Keep written lines in memory, as they would appear on the terminal."""

    def __init__(self, terminal: Terminal = Terminal.COLORLESS):
        self.terminal: Terminal = terminal
        self.lines: list[str] = []

    @override
    def writeln(self, message: str, color: Color | None = None) -> None:
        self.lines.append(self.terminal.colorize(message, color))

    def getvalue(self) -> str:
        return "".join(line + "\n" for line in self.lines)


def stdout() -> StreamOutput:
    return StreamOutput(sys.stdout)
