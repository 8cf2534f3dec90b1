# src/rps_sims/core/store.py

from __future__ import annotations
import logging
from typing import Iterator, List, Mapping

import numpy as np

from .boundary import Boundary
from .events import BaseEvent, DestroyEvent, SpawnEvent
from .kinds import ParticleKind
from .particle import Particle, create_particle
from .recording import tally_kinds
from rps_sims.utils.random import rng

logger = logging.getLogger(__name__)


class ParticleStore:
    """
    Owns the single authoritative, ordered sequence of live particles.

    - Particles are addressed by a stable integer id that is never reused.
    - Additions append; removals mark-and-compact, so every survivor keeps
      its identity and its order relative to the others.
    - Anything that draws randomness takes the speed explicitly and uses
      either the injected generators or the named "placement"/"culling"
      streams from rps_sims.utils.random.
    """

    def __init__(
        self,
        boundary: Boundary,
        radius: float,
        placement_rng: np.random.Generator | None = None,
        culling_rng: np.random.Generator | None = None,
    ):
        self.boundary = boundary
        self.radius = float(radius)
        self._placement_rng = placement_rng
        self._culling_rng = culling_rng
        self._particles: List[Particle] = []
        self._next_id = 0

    # ------------------------------------------------------------------ access

    @property
    def particles(self) -> List[Particle]:
        return self._particles

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def get(self, particle_id: int) -> Particle | None:
        for p in self._particles:
            if p.id == particle_id:
                return p
        return None

    def of_kind(self, kind: ParticleKind | str) -> List[Particle]:
        kind = ParticleKind.parse(kind)
        return [p for p in self._particles if p.kind is kind]

    def counts(self) -> dict[ParticleKind, int]:
        return tally_kinds(p.kind for p in self._particles)

    # ---------------------------------------------------------------- mutation

    def new_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def add(self, particle: Particle) -> Particle:
        if not self.boundary.contains(particle.pos, radius=self.radius):
            raise ValueError(f"Particle placed outside the arena at {particle.pos.tolist()}")
        if particle.id is None:
            particle.id = self.new_id()
        elif self.get(particle.id) is not None:
            raise ValueError(f"Particle id {particle.id} already in store")
        else:
            self._next_id = max(self._next_id, particle.id + 1)
        self._particles.append(particle)
        return particle

    def spawn(self, kind: ParticleKind | str, speed: float) -> Particle:
        """Create a particle of `kind` at a uniform random spot with velocity in U[-speed/2, speed/2]^2."""
        gen = self._placement_rng if self._placement_rng is not None else rng("placement")
        pos = self.boundary.sample_position(self.radius, gen)
        vel = gen.uniform(-speed / 2.0, speed / 2.0, size=2)
        return self.add(create_particle(kind, pos, vel))

    def clear(self) -> None:
        self._particles = []

    def initialize(self, counts: Mapping[ParticleKind | str, int], speed: float, tick: int = 0) -> List[BaseEvent]:
        """Replace every particle with counts[kind] fresh particles per kind."""
        self.clear()
        wanted = {ParticleKind.parse(k): int(n) for k, n in counts.items()}
        events: List[BaseEvent] = []
        for kind in ParticleKind:
            for _ in range(max(0, wanted.get(kind, 0))):
                p = self.spawn(kind, speed)
                events.append(SpawnEvent(tick=tick, particle_id=p.id, kind=kind, reason="initialize"))
        logger.info(
            "Initialized %d particles (%s) at speed %.2f",
            len(self),
            ", ".join(f"{k.value}={n}" for k, n in self.counts().items()),
            speed,
        )
        return events

    def resize(self, kind: ParticleKind | str, new_count: int, speed: float, tick: int = 0) -> List[BaseEvent]:
        """
        Move the live population of one kind to new_count, leaving every
        particle of the other kinds untouched.
        """
        kind = ParticleKind.parse(kind)
        new_count = max(0, int(new_count))
        members = self.of_kind(kind)
        old_count = len(members)
        events: List[BaseEvent] = []

        if new_count > old_count:
            for _ in range(new_count - old_count):
                p = self.spawn(kind, speed)
                events.append(SpawnEvent(tick=tick, particle_id=p.id, kind=kind, reason="resize"))
        elif new_count < old_count:
            gen = self._culling_rng if self._culling_rng is not None else rng("culling")
            picks = gen.choice(old_count, size=old_count - new_count, replace=False)
            doomed = {members[int(i)].id for i in picks}
            # compact in one pass; survivors keep their relative order
            self._particles = [p for p in self._particles if p.id not in doomed]
            events.extend(
                DestroyEvent(tick=tick, particle_id=pid, kind=kind, reason="resize")
                for pid in sorted(doomed)
            )

        if new_count != old_count:
            logger.debug("Resized %s: %d -> %d", kind.value, old_count, new_count)
        return events

    def rescale_all_velocities(self, new_speed: float) -> int:
        """
        Give every moving particle the magnitude new_speed, keeping its
        direction. Stationary particles have no direction and are skipped.
        Returns how many particles were rescaled.
        """
        rescaled = 0
        for p in self._particles:
            current = p.speed
            if current == 0.0:
                continue
            p.vel *= new_speed / current
            rescaled += 1
        logger.debug("Rescaled %d/%d velocities to speed %.2f", rescaled, len(self), new_speed)
        return rescaled
