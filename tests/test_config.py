from __future__ import annotations

import pathlib
import re

import pytest

from housie.config import resolve_cors_origins, resolve_int_env

PYPROJECT = pathlib.Path(__file__).resolve().parents[1] / "pyproject.toml"


@pytest.mark.parametrize("raw, expected", [("0", 1), ("-5", 1), ("7", 7), ("abc", 50), ("", 50)])
def test_ticket_limit_is_clamped(monkeypatch, raw, expected):
    monkeypatch.setenv("MAX_TICKETS_PER_REQUEST", raw)

    assert resolve_int_env("MAX_TICKETS_PER_REQUEST", 50, minimum=1) == expected


def test_int_env_without_minimum(monkeypatch):
    monkeypatch.setenv("SOME_LIMIT", "-2")

    assert resolve_int_env("SOME_LIMIT", 3) == -2


def test_cors_origins_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    assert resolve_cors_origins() == ("http://a.test", "http://b.test")


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    assert resolve_cors_origins() == "*"


@pytest.mark.parametrize("dist", ["flask", "flask-cors", "marshmallow", "python-dotenv", "werkzeug"])
def test_imported_libraries_are_declared(dist):
    text = PYPROJECT.read_text(encoding="utf-8")

    assert re.search(rf'^\s*"{re.escape(dist)}[<>=!~]', text, re.MULTILINE)
