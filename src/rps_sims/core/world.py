# src/rps_sims/core/world.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Mapping

from .boundary import Boundary
from .events import BaseEvent, ConversionEvent
from .kinds import ParticleKind
from .physics import step_physics
from .recording import FrameSnapshot, snapshot_particles
from .store import ParticleStore

logger = logging.getLogger(__name__)


@dataclass
class World:
    """The arena: its walls, particle radius, the particle store and a tick counter."""
    boundary: Boundary
    radius: float
    store: ParticleStore
    tick: int = 0
    last_events: List[BaseEvent] = field(default_factory=list)

    @property
    def contact_distance(self) -> float:
        return 2.0 * self.radius

    @property
    def n_particles(self) -> int:
        return len(self.store)

    def initialize(self, counts: Mapping[ParticleKind | str, int], speed: float) -> None:
        self.tick = 0
        self.last_events = self.store.initialize(counts, speed, tick=self.tick)

    def clear(self) -> None:
        self.store.clear()
        self.tick = 0
        self.last_events = []

    def step(self) -> List[BaseEvent]:
        self.last_events = step_physics(self)
        if logger.isEnabledFor(logging.DEBUG):
            conversions = sum(1 for e in self.last_events if isinstance(e, ConversionEvent))
            logger.debug("tick %d: %d events, %d conversions", self.tick, len(self.last_events), conversions)
        return self.last_events

    def counts(self) -> dict[ParticleKind, int]:
        return self.store.counts()

    def snapshot(self, events: List[BaseEvent] | None = None, *, with_counts: bool = False) -> FrameSnapshot:
        return snapshot_particles(self.store, self.tick, events, with_counts=with_counts)
