# src/rps_sims/core/boundary.py
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

import numpy as np

from .particle import Particle
from .events import HitWallEvent, BaseEvent

# inward wall normals, indexed by (axis, side)
_NORMALS = {
    (0, "low"): np.array([1.0, 0.0]),
    (0, "high"): np.array([-1.0, 0.0]),
    (1, "low"): np.array([0.0, 1.0]),
    (1, "high"): np.array([0.0, -1.0]),
}


class Boundary(ABC):
    @abstractmethod
    def reflect(self, particle: Particle, radius: float, tick: int) -> List[BaseEvent]:
        """
        Bounce the particle off any wall it reached this tick.
        Mutates position/velocity in place and returns the wall events.
        """
        ...

    @abstractmethod
    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        """True if a circle of `radius` centred at pos fits inside."""
        ...

    @abstractmethod
    def sample_position(self, radius: float, gen: np.random.Generator) -> np.ndarray:
        ...


@dataclass
class BoxBoundary(Boundary):
    width: float
    height: float

    def reflect(self, particle: Particle, radius: float, tick: int) -> List[BaseEvent]:
        events: List[BaseEvent] = []
        for axis, extent in ((0, self.width), (1, self.height)):
            side = _reflect_axis(particle.pos, particle.vel, axis, radius, extent - radius)
            if side is not None:
                events.append(HitWallEvent(
                    tick=tick,
                    particle_id=particle.id,
                    norm_vec=_NORMALS[(axis, side)].copy(),
                ))
        return events

    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        x, y = float(pos[0]), float(pos[1])
        return (
            radius <= x <= self.width - radius
            and radius <= y <= self.height - radius
        )

    def sample_position(self, radius: float, gen: np.random.Generator) -> np.ndarray:
        x = gen.uniform(radius, self.width - radius)
        y = gen.uniform(radius, self.height - radius)
        return np.array([x, y], dtype=float)


def _reflect_axis(pos: np.ndarray, vel: np.ndarray, axis: int, lo: float, hi: float) -> str | None:
    """
    Reflect one axis at a wall that was touched or crossed.

    The overshoot is mirrored back inside and the velocity component is
    negated if it still points out of the arena. Returns the side that
    bounced, or None if the particle is clear of both walls (or resting
    on one while moving away from it).
    """
    if pos[axis] <= lo:
        side, sign = "low", -1.0
        wall = lo
    elif pos[axis] >= hi:
        side, sign = "high", 1.0
        wall = hi
    else:
        return None

    overshoot = pos[axis] != wall
    outward = vel[axis] * sign > 0
    if not (overshoot or outward):
        return None
    if overshoot:
        pos[axis] = 2.0 * wall - pos[axis]
        # a step longer than the arena itself would mirror past the far wall
        pos[axis] = min(hi, max(lo, pos[axis]))
    if outward:
        vel[axis] = -vel[axis]
    return side
