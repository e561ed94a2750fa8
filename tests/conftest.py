"""Pytest fixtures for biomorph tests."""

from __future__ import annotations

import random

import pytest

from biomorph import GenomeEngine


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def engine(seeded_rng):
    return GenomeEngine(rng=seeded_rng)
