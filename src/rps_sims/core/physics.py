# src/rps_sims/core/physics.py

from __future__ import annotations
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .world import World
from .collisions import in_contact, resolve_collision
from .events import BaseEvent


def step_physics(world: World) -> List[BaseEvent]:
    """
    Advance the arena by one tick and return the tick's events.

    1. Contacts: every unordered pair (i < j) closer than 2 * radius is
       resolved, in list order. A particle in several overlaps is resolved
       against each in turn, so it may convert twice in one tick.
    2. Integrate: pos += vel.
    3. Walls: reflect anything that reached a wall.

    Contacts are judged on the positions at the start of the tick, before
    anything moves.

    Works on a copy of the particle list taken on entry, so particles added
    to the store during the tick are first visited on the next one.
    """
    events: List[BaseEvent] = []
    tick = world.tick + 1
    contact = world.contact_distance

    particles = list(world.store.particles)
    n = len(particles)

    for i in range(n):
        for j in range(i + 1, n):
            a = particles[i]
            b = particles[j]
            if not in_contact(a, b, contact):
                continue
            produced = resolve_collision(a, b, tick)
            if produced:
                events.extend(produced)

    for p in particles:
        p.pos += p.vel

    for p in particles:
        events.extend(world.boundary.reflect(p, world.radius, tick))

    world.tick = tick
    return events
