"""Shared test fixtures."""

import random

import pytest
from spacestation import World


@pytest.fixture
def rng() -> random.Random:
    """A seeded generator so randomized tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def world(rng: random.Random) -> World:
    """Play area 100, 5 requested resources (6 spawned), max cap 50."""
    return World.new(play_area=100, spawn_amount=5, resource_max_cap=50, rng=rng)
