"""Ticket routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from housie.errors import InvalidCountError
from housie.schemas.ticket import TicketRequestSchema, TicketResponseSchema
from housie.services.ticket_service import TicketService
from housie.utils.responses import ok
from housie.utils.ticket_format import encode_hex_ticket, flatten_ticket, split_tickets

tickets_bp = Blueprint("tickets", __name__)

_request_schema = TicketRequestSchema()
_response_schema = TicketResponseSchema()
_service = TicketService()


def _generate(payload: dict):
    data = _request_schema.load(payload)

    count = int(data["count"])
    limit = int(current_app.config["MAX_TICKETS_PER_REQUEST"])
    if count < 1:
        raise InvalidCountError(
            message="Invalid count",
            details={"count": ["Must be >= 1"]},
        )
    if count > limit:
        raise InvalidCountError(
            message="Invalid count",
            details={"count": [f"Must be <= {limit}"]},
        )

    rows = _service.generate_tickets(count, seed=data.get("seed"))

    tickets = []
    for grid in split_tickets(rows, rows_per_ticket=_service.rows_per_ticket):
        cells = flatten_ticket(grid)
        tickets.append({"grid": grid, "numbers": ",".join(cells), "hex": encode_hex_ticket(cells)})

    return ok(_response_schema.dump({"count": count, "rows": rows, "tickets": tickets}))


@tickets_bp.get("/tickets")
def get_tickets():
    return _generate(request.args.to_dict())


@tickets_bp.post("/tickets")
def create_tickets():
    payload = request.get_json(silent=True) or {}
    return _generate(payload)
