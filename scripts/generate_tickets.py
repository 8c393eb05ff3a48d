"""Print freshly generated Housie tickets.

Usage:
  python scripts/generate_tickets.py --count 3
  python scripts/generate_tickets.py --count 2 --seed 42 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from collections.abc import Sequence

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from housie.errors import AppError
from housie.services.ticket_service import TicketService
from housie.utils.ticket_format import encode_hex_ticket, flatten_ticket, render_ticket_text, split_tickets


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate Housie (Tambola) tickets")
    parser.add_argument("--count", dest="count", type=int, default=1)
    parser.add_argument("--seed", dest="seed", type=int, default=None, help="Seed for a reproducible batch")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print tickets as JSON")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    service = TicketService()
    try:
        rows = service.generate_tickets(args.count, seed=args.seed)
    except AppError as exc:
        logger.error("%s: %s (details=%s)", exc.code, exc.message, exc.details)
        return 2

    grids = split_tickets(rows, rows_per_ticket=service.rows_per_ticket)

    if args.as_json:
        out = []
        for grid in grids:
            cells = flatten_ticket(grid)
            out.append({"grid": grid, "numbers": ",".join(cells), "hex": encode_hex_ticket(cells)})
        print(json.dumps(out, indent=2))
        return 0

    for idx, grid in enumerate(grids, start=1):
        print(f"Ticket {idx}")
        print(render_ticket_text(grid))
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
