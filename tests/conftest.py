from __future__ import annotations

import random

import pytest

from housie import create_app
from housie.config import TestingConfig


class FirstPickRandom(random.Random):
    """Random source that always takes the first candidate."""

    def randrange(self, start, stop=None, step=1):  # type: ignore[override]
        return start if stop is not None else 0

    def sample(self, population, k, *, counts=None):  # type: ignore[override]
        return list(population)[:k]


@pytest.fixture
def first_pick_rng() -> FirstPickRandom:
    return FirstPickRandom()


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
