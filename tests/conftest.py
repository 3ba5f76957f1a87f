"""Pytest configuration for raytracer tests.

Every entropy-consuming call takes an explicit random source, so tests get a
seeded one from the ``rng`` fixture, or a ``FixedRandom`` when a test needs to
force one branch of a random decision.
"""

import random

import pytest


class FixedRandom:
    """Random source that always returns the same draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    """Seeded random source, fresh for every test."""
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom sources."""
    return FixedRandom
