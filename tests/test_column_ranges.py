from __future__ import annotations

import pytest

from housie.errors import ConfigurationError
from housie.services.column_ranges import COLUMN_RANGES, MAX_NUMBER, MIN_NUMBER, ColumnRange, range_index


def test_catalog_partitions_1_to_90():
    covered = [n for r in COLUMN_RANGES for n in r.values()]
    assert covered == list(range(1, 91))
    assert (MIN_NUMBER, MAX_NUMBER) == (1, 90)


def test_catalog_widths():
    assert [r.width for r in COLUMN_RANGES] == [9, 10, 10, 10, 10, 10, 10, 10, 11]


@pytest.mark.parametrize(
    "number, expected",
    [(1, 0), (9, 0), (10, 1), (59, 5), (79, 7), (80, 8), (90, 8), (0, None), (91, None)],
)
def test_range_index(number, expected):
    assert range_index(number) == expected


def test_inverted_range_is_rejected():
    with pytest.raises(ConfigurationError):
        ColumnRange(10, 1)
