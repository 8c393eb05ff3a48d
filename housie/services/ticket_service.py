"""Business logic for generating Housie (Tambola) tickets.

A ticket is a 3 x 9 grid with 15 numbers from 1..90:
- every column range contributes one to three numbers,
- every row holds exactly five numbers,
- numbers from the same range ascend down the rows.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

from housie.errors import InvalidCountError
from housie.services.column_ranges import COLUMN_RANGES, ColumnRange
from housie.services.grid_formatter import COLUMNS_PER_ROW, FormattedRow, expand_row
from housie.services.number_selector import (
    MAX_PER_RANGE,
    NUMBERS_PER_TICKET,
    check_capacity,
    select_numbers,
)
from housie.services.row_assigner import ROWS_PER_TICKET, assign_rows

logger = logging.getLogger(__name__)

FormattedTicket = list[FormattedRow]


@dataclass(frozen=True)
class Ticket:
    """Ticket numbers after row assignment, before blanks are inserted."""

    rows: tuple[tuple[int, ...], ...]
    numbers: frozenset[int]

    def format(self, rng: random.Random, width: int = COLUMNS_PER_ROW) -> FormattedTicket:
        return [expand_row(row, rng, width=width) for row in self.rows]


class TicketService:
    """Generate tickets one at a time or in batches."""

    def __init__(
        self,
        ranges: Sequence[ColumnRange] = COLUMN_RANGES,
        numbers_per_ticket: int = NUMBERS_PER_TICKET,
        max_per_range: int = MAX_PER_RANGE,
        rows_per_ticket: int = ROWS_PER_TICKET,
        columns_per_row: int = COLUMNS_PER_ROW,
    ) -> None:
        check_capacity(ranges, total=numbers_per_ticket, max_per_range=max_per_range)
        self._ranges = tuple(ranges)
        self._numbers_per_ticket = numbers_per_ticket
        self._max_per_range = max_per_range
        self._rows_per_ticket = rows_per_ticket
        self._columns_per_row = columns_per_row

    @property
    def rows_per_ticket(self) -> int:
        return self._rows_per_ticket

    def build_ticket(self, rng: random.Random) -> Ticket:
        buckets = select_numbers(
            rng,
            self._ranges,
            total=self._numbers_per_ticket,
            max_per_range=self._max_per_range,
        )
        rows = assign_rows(buckets, row_count=self._rows_per_ticket)
        return Ticket(
            rows=tuple(tuple(row) for row in rows),
            numbers=frozenset(n for bucket in buckets for n in bucket),
        )

    def generate_ticket(self, rng: random.Random | None = None) -> FormattedTicket:
        """Generate one formatted ticket.

        Args:
            rng: Random source owned by this call. A fresh OS-seeded
                generator is used when omitted.
        """

        if rng is None:
            rng = random.Random()
        return self.build_ticket(rng).format(rng, width=self._columns_per_row)

    def generate_tickets(self, count: int, seed: int | None = None) -> list[FormattedRow]:
        """Generate ``count`` independent tickets as one flat list of rows.

        Rows ``k * rows_per_ticket`` up to ``(k + 1) * rows_per_ticket`` belong
        to ticket ``k``. Passing ``seed`` makes the whole batch reproducible.
        """

        if count < 1:
            raise InvalidCountError(
                message="Invalid count",
                details={"count": ["Must be >= 1"]},
            )

        master = random.Random(seed) if seed is not None else None

        rows: list[FormattedRow] = []
        for _ in range(int(count)):
            rng = random.Random(master.getrandbits(64)) if master is not None else random.Random()
            rows.extend(self.generate_ticket(rng))

        logger.debug("Generated %s tickets (seeded=%s)", count, seed is not None)
        return rows
