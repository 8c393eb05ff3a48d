from __future__ import annotations

import pytest

from housie.errors import ValidationError
from housie.utils.ticket_format import (
    compact_rows,
    encode_hex_ticket,
    flatten_ticket,
    render_ticket_text,
    split_tickets,
)

GRID = [
    ["", "", "", "", "1", "10", "20", "30", "60"],
    ["2", "", "11", "", "21", "", "40", "", "70"],
    ["3", "12", "22", "50", "80", "", "", "", ""],
]


def test_compact_rows():
    assert compact_rows(GRID) == [
        ["1", "10", "20", "30", "60"],
        ["2", "11", "21", "40", "70"],
        ["3", "12", "22", "50", "80"],
    ]


def test_flatten_ticket():
    assert flatten_ticket(GRID) == [
        "1", "10", "20", "30", "60",
        "2", "11", "21", "40", "70",
        "3", "12", "22", "50", "80",
    ]


def test_encode_hex_pads_to_two_digits():
    assert encode_hex_ticket(["5", "", "42"]) == "30353432"


def test_encode_hex_length():
    assert len(encode_hex_ticket(flatten_ticket(GRID))) == 60


def test_split_tickets():
    rows = GRID + GRID

    assert split_tickets(rows) == [GRID, GRID]


def test_split_tickets_rejects_partial_ticket():
    with pytest.raises(ValidationError):
        split_tickets(GRID[:2])


def test_render_ticket_text():
    text = render_ticket_text(GRID)

    assert text.splitlines()[0] == " .  .  .  .  1 10 20 30 60"
    assert len(text.splitlines()) == 3
