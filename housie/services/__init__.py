"""Ticket generation services."""
