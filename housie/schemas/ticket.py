"""Schemas for the ticket generation API."""

from __future__ import annotations

from marshmallow import Schema, fields


class TicketRequestSchema(Schema):
    # Bounds are checked by the route so both ends report invalid_count.
    count = fields.Integer(required=False, load_default=1)

    # Same seed, same batch.
    seed = fields.Integer(required=False, load_default=None, allow_none=True)


class TicketSchema(Schema):
    grid = fields.List(fields.List(fields.String()), required=True)

    # Non-empty cells joined with ","
    numbers = fields.String(required=True)

    hex = fields.String(required=True)


class TicketResponseSchema(Schema):
    count = fields.Integer(required=True)

    # Flat batch output: 3 rows per ticket.
    rows = fields.List(fields.List(fields.String()), required=True)

    tickets = fields.List(fields.Nested(TicketSchema), required=True)
