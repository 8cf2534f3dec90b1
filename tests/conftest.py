"""Shared fixtures for rps_sims tests."""

from __future__ import annotations

import numpy as np
import pytest

from rps_sims.core import BoxBoundary, ParticleStore, World, create_particle
from rps_sims.utils.random import seed_all


@pytest.fixture(autouse=True)
def _seeded_streams():
    """Every test starts from the same named RNG streams."""
    seed_all(1234)
    yield
    seed_all(None)


def make_world(width: float = 100.0, height: float = 100.0, radius: float = 5.0, seed: int = 0) -> World:
    """Empty arena with its own deterministic generators."""
    boundary = BoxBoundary(width=width, height=height)
    store = ParticleStore(
        boundary=boundary,
        radius=radius,
        placement_rng=np.random.default_rng(seed),
        culling_rng=np.random.default_rng(seed + 1),
    )
    return World(boundary=boundary, radius=radius, store=store)


def place(world: World, kind, pos, vel):
    """Add a hand-placed particle to the world's store and return it."""
    return world.store.add(create_particle(kind, pos, vel))


@pytest.fixture
def world() -> World:
    return make_world()
