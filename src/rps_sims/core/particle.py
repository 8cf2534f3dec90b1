# src/rps_sims/core/particle.py

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .kinds import ParticleKind
from .recording import ParticleSnapshot
from rps_sims.utils.vector_utils import magnitude


@dataclass(eq=False)
class Particle:
    """
    One simulated rock, paper or scissors.

    - id: stable handle assigned by the ParticleStore (None until stored)
    - kind: mutable, changes when the particle loses a collision
    - pos / vel: world-space position and per-tick displacement, shape (2,)

    Equality is identity: two particles at the same spot are still distinct.
    """
    id: int | None
    kind: ParticleKind
    pos: np.ndarray
    vel: np.ndarray

    @property
    def speed(self) -> float:
        return magnitude(self.vel)

    def to_snapshot(self) -> ParticleSnapshot:
        return ParticleSnapshot(
            id=self.id,
            kind=self.kind,
            x=float(self.pos[0]),
            y=float(self.pos[1]),
        )


def create_particle(
    kind: ParticleKind | str,
    pos,
    vel,
) -> Particle:
    """Helper to build a Particle with float (2,) arrays."""
    return Particle(
        id=None,
        kind=ParticleKind.parse(kind),
        pos=np.array(pos, dtype=float),
        vel=np.array(vel, dtype=float),
    )
