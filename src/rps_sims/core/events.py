# src/rps_sims/core/events.py

from __future__ import annotations
from dataclasses import dataclass
from abc import ABC

import numpy as np

from .kinds import ParticleKind


@dataclass(kw_only=True)
class BaseEvent(ABC):
    """Marker base class so you can type on 'list[BaseEvent]'."""
    tick: int  # tick during which this event happened
    a_id: int | None = None
    b_id: int | None = None

    def to_payload_dict(self) -> dict:
        """Convert event-specific data to a serializable dict."""
        return {}


@dataclass(kw_only=True)
class CollisionEvent(BaseEvent):
    a_id: int
    b_id: int
    pos: np.ndarray         # contact point (2,)
    relative_speed: float   # |v_b - v_a| along the contact normal, pre-collision

    def to_payload_dict(self) -> dict:
        return {
            "pos": self.pos.tolist(),
            "relative_speed": self.relative_speed,
        }


@dataclass(kw_only=True)
class ConversionEvent(BaseEvent):
    """The loser of a collision (a_id) took on the winner's (b_id) kind."""
    loser_id: int
    winner_id: int
    old_kind: ParticleKind
    new_kind: ParticleKind

    def __post_init__(self):
        self.a_id = self.loser_id
        self.b_id = self.winner_id

    def to_payload_dict(self) -> dict:
        return {
            "old_kind": self.old_kind.value,
            "new_kind": self.new_kind.value,
        }


@dataclass(kw_only=True)
class HitWallEvent(BaseEvent):
    particle_id: int
    norm_vec: np.ndarray    # (2,) unit vector pointing into the arena from the wall

    def __post_init__(self):
        self.a_id = self.particle_id

    def to_payload_dict(self) -> dict:
        return {"norm_vec": self.norm_vec.tolist()}


@dataclass(kw_only=True)
class SpawnEvent(BaseEvent):
    particle_id: int
    kind: ParticleKind
    reason: str = "unknown"

    def __post_init__(self):
        self.a_id = self.particle_id

    def to_payload_dict(self) -> dict:
        return {"kind": self.kind.value, "reason": self.reason}


@dataclass(kw_only=True)
class DestroyEvent(BaseEvent):
    particle_id: int
    kind: ParticleKind
    reason: str = "unknown"

    def __post_init__(self):
        self.a_id = self.particle_id

    def to_payload_dict(self) -> dict:
        payload = super().to_payload_dict()
        payload.update({"kind": self.kind.value, "reason": self.reason})
        return payload
