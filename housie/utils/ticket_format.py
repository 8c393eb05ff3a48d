"""Helpers that turn generated grids into the shapes collaborators consume."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from housie.errors import ValidationError


def split_tickets(rows: Sequence[Sequence[str]], rows_per_ticket: int = 3) -> list[list[list[str]]]:
    """Regroup a batch's flat row list into one grid per ticket."""

    if len(rows) % rows_per_ticket:
        raise ValidationError(
            message="Row count is not a whole number of tickets",
            details={"rows": len(rows), "rows_per_ticket": rows_per_ticket},
        )
    return [
        [list(row) for row in rows[i : i + rows_per_ticket]]
        for i in range(0, len(rows), rows_per_ticket)
    ]


def compact_rows(grid: Iterable[Sequence[str]]) -> list[list[str]]:
    """Drop blank cells from every row."""

    return [[cell for cell in row if cell] for row in grid]


def flatten_ticket(grid: Iterable[Sequence[str]]) -> list[str]:
    """Non-empty cells of a grid in row order."""

    return [cell for row in compact_rows(grid) for cell in row]


def encode_hex_ticket(cells: Iterable[str]) -> str:
    """Hex-encode the numbers of a ticket, each padded to two digits.

    ``["5", "42"]`` becomes the ASCII text ``"0542"``, hex-encoded as
    ``"30353432"``. Blank cells are skipped.
    """

    digits = "".join(f"{int(cell):02d}" for cell in cells if cell)
    return digits.encode("ascii").hex()


def render_ticket_text(grid: Iterable[Sequence[str]], cell_width: int = 2) -> str:
    # Blank cells render as dots so columns stay aligned.
    lines = []
    for row in grid:
        lines.append(" ".join((cell or ".").rjust(cell_width) for cell in row))
    return "\n".join(lines)
