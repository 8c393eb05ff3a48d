from __future__ import annotations

from housie.services.column_ranges import COLUMN_RANGES, range_index


def assert_valid_ticket(grid: list[list[str]]) -> None:
    assert len(grid) == 3
    assert all(len(row) == 9 for row in grid)

    numbers = [int(cell) for row in grid for cell in row if cell]
    assert len(numbers) == 15
    assert len(set(numbers)) == 15
    assert all(1 <= n <= 90 for n in numbers)

    for row in grid:
        assert sum(1 for cell in row if cell) == 5
        assert sum(1 for cell in row if not cell) == 4

    per_range: dict[int, list[tuple[int, int]]] = {}
    for row_idx, row in enumerate(grid):
        for cell in row:
            if cell:
                per_range.setdefault(range_index(int(cell)), []).append((row_idx, int(cell)))

    assert sorted(per_range) == list(range(len(COLUMN_RANGES)))
    assert all(1 <= len(v) <= 3 for v in per_range.values())
    assert sum(len(v) for v in per_range.values()) == 15

    for entries in per_range.values():
        values = [n for _, n in sorted(entries)]
        assert values == sorted(values)
