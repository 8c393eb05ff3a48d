"""Number selection under per-range caps."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from housie.errors import ConfigurationError
from housie.services.column_ranges import COLUMN_RANGES, ColumnRange

logger = logging.getLogger(__name__)

NUMBERS_PER_TICKET = 15
MAX_PER_RANGE = 3


def check_capacity(
    ranges: Sequence[ColumnRange],
    total: int = NUMBERS_PER_TICKET,
    max_per_range: int = MAX_PER_RANGE,
) -> None:
    """Fail fast if ``ranges`` cannot supply ``total`` unique numbers."""

    if not ranges:
        raise ConfigurationError(message="No column ranges configured")
    if max_per_range < 1:
        raise ConfigurationError(
            message="Per-range cap must be >= 1",
            details={"max_per_range": max_per_range},
        )
    if len(ranges) > total:
        raise ConfigurationError(
            message="More column ranges than numbers per ticket",
            details={"ranges": len(ranges), "total": total},
        )

    capacity = sum(min(r.width, max_per_range) for r in ranges)
    if capacity < total:
        raise ConfigurationError(
            message="Column ranges cannot supply enough numbers",
            details={"capacity": capacity, "total": total},
        )


def select_numbers(
    rng: random.Random,
    ranges: Sequence[ColumnRange] = COLUMN_RANGES,
    total: int = NUMBERS_PER_TICKET,
    max_per_range: int = MAX_PER_RANGE,
) -> list[list[int]]:
    """Draw ``total`` unique numbers, between 1 and ``max_per_range`` per range.

    Every range first gets one number; the rest are spread over ranges
    picked uniformly among those still below the cap.

    Returns:
        One bucket per range, in catalog order, holding the numbers drawn
        from that range in draw order.
    """

    check_capacity(ranges, total=total, max_per_range=max_per_range)

    remaining = [r.values() for r in ranges]
    buckets: list[list[int]] = [[] for _ in ranges]
    selected = 0

    def _draw(idx: int) -> None:
        nonlocal selected
        candidates = remaining[idx]
        buckets[idx].append(candidates.pop(rng.randrange(len(candidates))))
        selected += 1

    for idx in range(len(ranges)):
        _draw(idx)

    while selected < total:
        eligible = [
            idx
            for idx in range(len(ranges))
            if len(buckets[idx]) < max_per_range and remaining[idx]
        ]
        if not eligible:
            raise ConfigurationError(
                message="Column ranges exhausted before ticket was filled",
                details={"selected": selected, "total": total},
            )
        _draw(eligible[rng.randrange(len(eligible))])

    logger.debug("Selected numbers per range: %s", [len(b) for b in buckets])
    return buckets
