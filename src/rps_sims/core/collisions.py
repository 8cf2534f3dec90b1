# src/rps_sims/core/collisions.py

from __future__ import annotations
import logging
from typing import List

import numpy as np

from .particle import Particle
from .kinds import winner_of
from .events import BaseEvent, CollisionEvent, ConversionEvent
from rps_sims.utils.vector_utils import normalize, perpendicular, project, distance

logger = logging.getLogger(__name__)


def in_contact(a: Particle, b: Particle, contact_distance: float) -> bool:
    """True when the centres are strictly closer than contact_distance (2 * radius)."""
    return distance(a.pos, b.pos) < contact_distance


def resolve_collision(a: Particle, b: Particle, tick: int = 0) -> List[BaseEvent] | None:
    """
    Equal-mass elastic collision of two touching particles, then kind conversion.

    The velocities are split into components along the contact normal and the
    tangent. With equal masses the 1D elastic solution along the normal is an
    exchange of the normal components; tangential components are kept.

    Conversion uses both particles' kinds from before this call: the winner
    of the beats relation turns the loser into its own kind.

    Returns the events produced, or None when the centres coincide and no
    normal exists (both particles are left untouched).
    """
    n = normalize(b.pos - a.pos)
    if n is None:
        logger.debug("Degenerate collision skipped: particles %s and %s share a centre", a.id, b.id)
        return None
    t = perpendicular(n)

    a_n, a_t = project(a.vel, n), project(a.vel, t)
    b_n, b_t = project(b.vel, n), project(b.vel, t)

    a.vel = b_n * n + a_t * t
    b.vel = a_n * n + b_t * t

    events: List[BaseEvent] = [
        CollisionEvent(
            tick=tick,
            a_id=a.id,
            b_id=b.id,
            pos=0.5 * (a.pos + b.pos),
            relative_speed=abs(b_n - a_n),
        )
    ]

    kind_a, kind_b = a.kind, b.kind
    winner = winner_of(kind_a, kind_b)
    if winner is None:
        return events
    loser, victor = (b, a) if winner is kind_a else (a, b)
    old_kind = loser.kind
    loser.kind = winner
    events.append(ConversionEvent(
        tick=tick,
        loser_id=loser.id,
        winner_id=victor.id,
        old_kind=old_kind,
        new_kind=winner,
    ))
    return events


def pair_energy(a: Particle, b: Particle) -> float:
    """Sum of squared speeds of the pair (conserved by resolve_collision)."""
    return float(np.dot(a.vel, a.vel) + np.dot(b.vel, b.vel))
