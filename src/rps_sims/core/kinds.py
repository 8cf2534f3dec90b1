# src/rps_sims/core/kinds.py

from __future__ import annotations
from enum import Enum


class ParticleKind(str, Enum):
    """
    The three cyclic particle kinds.

    Declaration order is the beats cycle: each member beats the next one,
    and the last beats the first (rock -> scissors -> paper -> rock).
    """
    ROCK = "rock"
    SCISSORS = "scissors"
    PAPER = "paper"

    @property
    def beats(self) -> "ParticleKind":
        """The kind this kind defeats."""
        return _BEATS[self]

    @property
    def beaten_by(self) -> "ParticleKind":
        return _BEATEN_BY[self]

    @classmethod
    def parse(cls, value: "ParticleKind | str") -> "ParticleKind":
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


_ORDER = tuple(ParticleKind)
_BEATS = {k: _ORDER[(i + 1) % len(_ORDER)] for i, k in enumerate(_ORDER)}
_BEATEN_BY = {v: k for k, v in _BEATS.items()}


def winner_of(a: ParticleKind, b: ParticleKind) -> ParticleKind | None:
    """Kind that wins a meeting of a and b, or None for a draw."""
    if a.beats is b:
        return a
    if b.beats is a:
        return b
    return None


def empty_counts() -> dict[ParticleKind, int]:
    return {k: 0 for k in ParticleKind}
