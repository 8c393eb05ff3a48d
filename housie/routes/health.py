"""Health check routes."""

from __future__ import annotations

from flask import Blueprint, current_app

from housie.services.column_ranges import COLUMN_RANGES
from housie.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness plus the generator limits clients care about."""

    return ok(
        {
            "status": "ok",
            "column_ranges": [[r.start, r.end] for r in COLUMN_RANGES],
            "max_tickets_per_request": int(current_app.config["MAX_TICKETS_PER_REQUEST"]),
        }
    )
