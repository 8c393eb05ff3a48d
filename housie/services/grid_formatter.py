"""Expand ticket rows into fixed-width display rows."""

from __future__ import annotations

import random
from collections.abc import Sequence

from housie.errors import ConfigurationError

COLUMNS_PER_ROW = 9

FormattedRow = list[str]


def expand_row(row: Sequence[int], rng: random.Random, width: int = COLUMNS_PER_ROW) -> FormattedRow:
    """Return ``width`` cells: the row's numbers in order, blanks at random slots.

    Numbers are not moved to the display column of their range; they fill
    the non-blank slots left to right in the order the row holds them.
    """

    if len(row) > width:
        raise ConfigurationError(
            message="Row holds more numbers than display columns",
            details={"numbers": len(row), "width": width},
        )

    blanks = set(rng.sample(range(width), width - len(row)))
    numbers = iter(row)
    return ["" if pos in blanks else str(next(numbers)) for pos in range(width)]
