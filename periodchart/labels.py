"""Row label generators for datasets."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum

from typing_extensions import override


class LabelGenerator(ABC):
    @abstractmethod
    def generate(self, count: int) -> Iterator[str]:
        """Yield ``count`` labels in order."""
        pass

    def format(self, label: str) -> str:
        return label

    def _check_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Label count must be >= 0, got {count}")


class LatinLetter(LabelGenerator):
    """Spreadsheet-style letters: A, B, ... Z, AA, AB, ..."""

    def __init__(self, start: str = "A"):
        start = start.strip().upper()
        if not start or not (start.isascii() and start.isalpha()):
            start = "A"
        self.start: str = start

    @override
    def generate(self, count: int) -> Iterator[str]:
        self._check_count(count)
        label = self.start
        for _ in range(count):
            yield self.format(label)
            label = _increment_letters(label)

    @override
    def format(self, label: str) -> str:
        return label.upper()


def _increment_letters(label: str) -> str:
    chars = list(label)
    idx = len(chars) - 1
    while idx >= 0:
        if chars[idx] != "Z":
            chars[idx] = chr(ord(chars[idx]) + 1)
            return "".join(chars)
        chars[idx] = "A"
        idx -= 1
    return "A" + "".join(chars)


class DecimalNumber(LabelGenerator):
    def __init__(self, start: int = 1):
        self.start: int = start

    @override
    def generate(self, count: int) -> Iterator[str]:
        self._check_count(count)
        for value in range(self.start, self.start + count):
            yield self.format(str(value))


class LetterCase(Enum):
    UPPER = "upper"
    LOWER = "lower"


_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


class RomanNumber(LabelGenerator):
    """Roman numerals starting from a positive integer."""

    def __init__(self, start: int = 1, case: LetterCase = LetterCase.UPPER):
        self.start: int = max(start, 1)
        self.case: LetterCase = case

    @override
    def generate(self, count: int) -> Iterator[str]:
        self._check_count(count)
        for value in range(self.start, self.start + count):
            yield self.format(to_roman(value))

    @override
    def format(self, label: str) -> str:
        if self.case is LetterCase.LOWER:
            return label.lower()
        return label.upper()


def to_roman(value: int) -> str:
    if value < 1:
        raise ValueError(f"Roman numerals require a positive integer, got {value}")
    parts: list[str] = []
    for number, numeral in _ROMAN_NUMERALS:
        count, value = divmod(value, number)
        parts.append(numeral * count)
    return "".join(parts)
