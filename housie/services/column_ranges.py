"""Column range catalog.

Nine bands partition 1..90. Each band maps, by convention, to one of the
nine display columns of a ticket.
"""

from __future__ import annotations

from dataclasses import dataclass

from housie.errors import ConfigurationError


@dataclass(frozen=True)
class ColumnRange:
    """Inclusive numeric band ``start..end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ConfigurationError(
                message="Invalid column range",
                details={"range": [self.start, self.end]},
            )

    @property
    def width(self) -> int:
        return self.end - self.start + 1

    def contains(self, number: int) -> bool:
        return self.start <= int(number) <= self.end

    def values(self) -> list[int]:
        return list(range(self.start, self.end + 1))


COLUMN_RANGES: tuple[ColumnRange, ...] = (
    ColumnRange(1, 9),
    ColumnRange(10, 19),
    ColumnRange(20, 29),
    ColumnRange(30, 39),
    ColumnRange(40, 49),
    ColumnRange(50, 59),
    ColumnRange(60, 69),
    ColumnRange(70, 79),
    ColumnRange(80, 90),
)

MIN_NUMBER = COLUMN_RANGES[0].start
MAX_NUMBER = COLUMN_RANGES[-1].end


def range_index(number: int, ranges: tuple[ColumnRange, ...] = COLUMN_RANGES) -> int | None:
    """Return the index of the range holding ``number``, or None."""

    for idx, column_range in enumerate(ranges):
        if column_range.contains(number):
            return idx
    return None
