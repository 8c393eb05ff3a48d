"""Distribute per-range buckets over ticket rows.

Buckets are visited largest first. A single round-robin cursor runs across
all buckets, so each row receives ``total / row_count`` numbers whenever the
total is a multiple of ``row_count``. Inside a bucket the smallest number
always lands on the lowest row index it is given, which keeps every
column ascending top to bottom.
"""

from __future__ import annotations

from collections.abc import Sequence

ROWS_PER_TICKET = 3


def assign_batch(bucket: Sequence[int], rows: list[list[int]], cursor: int) -> int:
    """Append one bucket's numbers to ``rows`` and return the advanced cursor."""

    row_count = len(rows)
    targets: list[int] = []
    for _ in bucket:
        targets.append(cursor)
        cursor = (cursor + 1) % row_count

    for row_idx, number in zip(sorted(targets), sorted(bucket)):
        rows[row_idx].append(int(number))

    return cursor


def assign_rows(buckets: Sequence[Sequence[int]], row_count: int = ROWS_PER_TICKET) -> list[list[int]]:
    """Assign numbers from ``buckets`` (catalog order) to ``row_count`` rows."""

    rows: list[list[int]] = [[] for _ in range(row_count)]
    cursor = 0

    largest = max((len(b) for b in buckets), default=0)
    for size in range(largest, 0, -1):
        for bucket in buckets:
            if len(bucket) == size:
                cursor = assign_batch(bucket, rows, cursor)

    return rows
