# src/rps_sims/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from .kinds import ParticleKind, empty_counts

if TYPE_CHECKING:
    from .events import BaseEvent
    from .particle import Particle


@dataclass(frozen=True)
class ParticleSnapshot:
    """Read-only per-frame view of one particle, as consumed by renderers."""
    id: int | None
    kind: ParticleKind
    x: float
    y: float


@dataclass
class EventSnapshot:
    tick: int
    type: str               # e.g. "CollisionEvent", "ConversionEvent", ...
    a_id: int | None = None
    b_id: int | None = None
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass
class FrameSnapshot:
    tick: int
    particles: list[ParticleSnapshot]
    # Only filled when population history was requested.
    counts: dict[ParticleKind, int] | None = None
    events: list[EventSnapshot] = field(default_factory=list)

    def tally(self) -> dict[ParticleKind, int]:
        """Populations at this frame, computed from the particle list."""
        return tally_kinds(p.kind for p in self.particles)


@dataclass
class SimulationRecording:
    """
    In-memory record of a headless run: frames plus the population history.

    Nothing here is written to disk.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    history: list[dict[ParticleKind, int]] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)
        if frame.counts is not None:
            self.history.append(dict(frame.counts))

    @property
    def n_ticks(self) -> int:
        return len(self.frames)

    @property
    def final_counts(self) -> dict[ParticleKind, int] | None:
        if not self.frames:
            return None
        return self.frames[-1].tally()

    def winner(self) -> ParticleKind | None:
        """The only kind left alive at the last frame, if exactly one is."""
        counts = self.final_counts
        return sole_survivor(counts) if counts is not None else None


def tally_kinds(kinds: Iterable[ParticleKind]) -> dict[ParticleKind, int]:
    counts = empty_counts()
    for k in kinds:
        counts[k] += 1
    return counts


def sole_survivor(counts: Mapping[ParticleKind, int]) -> ParticleKind | None:
    alive = [k for k, n in counts.items() if n > 0]
    return alive[0] if len(alive) == 1 else None


def snapshot_particles(
    particles: Iterable[Particle],
    tick: int,
    events: list[BaseEvent] | None = None,
    *,
    with_counts: bool = False,
) -> FrameSnapshot:
    particle_snaps: list[ParticleSnapshot] = []
    for p in particles:
        if p.id is None:
            raise ValueError("All particles must have an id before snapshotting")
        particle_snaps.append(p.to_snapshot())

    event_snaps = [
        EventSnapshot(
            tick=e.tick,
            type=type(e).__name__,
            a_id=e.a_id,
            b_id=e.b_id,
            payload=e.to_payload_dict(),
        )
        for e in (events or [])
    ]
    counts = tally_kinds(p.kind for p in particle_snaps) if with_counts else None
    return FrameSnapshot(tick=tick, particles=particle_snaps, counts=counts, events=event_snaps)
