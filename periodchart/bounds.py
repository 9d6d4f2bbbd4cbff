"""Endpoint inclusion for intervals.

``Bounds`` is a closed algebra: every transform returns one of the four
members, and each is written as an exhaustive ``match`` so a new member
cannot slip through a default branch unnoticed.
"""

from enum import Enum
from typing import assert_never


class Bounds(str, Enum):
    INCLUDE_START_EXCLUDE_END = "[)"
    INCLUDE_ALL = "[]"
    EXCLUDE_START_INCLUDE_END = "(]"
    EXCLUDE_ALL = "()"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_flags(cls, start_included: bool, end_included: bool) -> "Bounds":
        """Return the member matching a pair of inclusion flags."""
        match (start_included, end_included):
            case (True, False):
                return cls.INCLUDE_START_EXCLUDE_END
            case (True, True):
                return cls.INCLUDE_ALL
            case (False, True):
                return cls.EXCLUDE_START_INCLUDE_END
            case _:
                return cls.EXCLUDE_ALL

    def is_start_included(self) -> bool:
        match self:
            case Bounds.INCLUDE_START_EXCLUDE_END | Bounds.INCLUDE_ALL:
                return True
            case Bounds.EXCLUDE_START_INCLUDE_END | Bounds.EXCLUDE_ALL:
                return False
            case _:
                assert_never(self)

    def is_end_included(self) -> bool:
        match self:
            case Bounds.EXCLUDE_START_INCLUDE_END | Bounds.INCLUDE_ALL:
                return True
            case Bounds.INCLUDE_START_EXCLUDE_END | Bounds.EXCLUDE_ALL:
                return False
            case _:
                assert_never(self)

    def equals_start(self, other: "Bounds") -> bool:
        """True if both values agree on the start endpoint, whatever the end."""
        return self.is_start_included() == other.is_start_included()

    def equals_end(self, other: "Bounds") -> bool:
        """True if both values agree on the end endpoint, whatever the start."""
        return self.is_end_included() == other.is_end_included()

    def include_start(self) -> "Bounds":
        match self:
            case Bounds.EXCLUDE_ALL:
                return Bounds.INCLUDE_START_EXCLUDE_END
            case Bounds.EXCLUDE_START_INCLUDE_END:
                return Bounds.INCLUDE_ALL
            case Bounds.INCLUDE_START_EXCLUDE_END | Bounds.INCLUDE_ALL:
                return self
            case _:
                assert_never(self)

    def include_end(self) -> "Bounds":
        match self:
            case Bounds.INCLUDE_START_EXCLUDE_END:
                return Bounds.INCLUDE_ALL
            case Bounds.EXCLUDE_ALL:
                return Bounds.EXCLUDE_START_INCLUDE_END
            case Bounds.EXCLUDE_START_INCLUDE_END | Bounds.INCLUDE_ALL:
                return self
            case _:
                assert_never(self)

    def exclude_start(self) -> "Bounds":
        match self:
            case Bounds.INCLUDE_ALL:
                return Bounds.EXCLUDE_START_INCLUDE_END
            case Bounds.INCLUDE_START_EXCLUDE_END:
                return Bounds.EXCLUDE_ALL
            case Bounds.EXCLUDE_START_INCLUDE_END | Bounds.EXCLUDE_ALL:
                return self
            case _:
                assert_never(self)

    def exclude_end(self) -> "Bounds":
        match self:
            case Bounds.INCLUDE_ALL:
                return Bounds.INCLUDE_START_EXCLUDE_END
            case Bounds.EXCLUDE_START_INCLUDE_END:
                return Bounds.EXCLUDE_ALL
            case Bounds.INCLUDE_START_EXCLUDE_END | Bounds.EXCLUDE_ALL:
                return self
            case _:
                assert_never(self)

    def replace_start(self, other: "Bounds") -> "Bounds":
        """Copy the start semantics of ``other``, keeping our own end."""
        if other.is_start_included():
            return self.include_start()
        return self.exclude_start()

    def replace_end(self, other: "Bounds") -> "Bounds":
        """Copy the end semantics of ``other``, keeping our own start."""
        if other.is_end_included():
            return self.include_end()
        return self.exclude_end()
