# src/rps_sims/core/__init__.py

from .config import SimConfig, ConfigError, clamp_speed, clamp_count
from .kinds import ParticleKind, winner_of
from .particle import Particle, create_particle
from .boundary import Boundary, BoxBoundary
from .store import ParticleStore
from .collisions import resolve_collision, in_contact
from .physics import step_physics
from .world import World
from .controller import SimulationController, SimState, ReentrantStepError, run_simulation
from .recording import FrameSnapshot, ParticleSnapshot, SimulationRecording
from .events import (
    BaseEvent,
    CollisionEvent,
    ConversionEvent,
    HitWallEvent,
    SpawnEvent,
    DestroyEvent,
)

__all__ = [
    "SimConfig",
    "ConfigError",
    "clamp_speed",
    "clamp_count",
    "ParticleKind",
    "winner_of",
    "Particle",
    "create_particle",
    "Boundary",
    "BoxBoundary",
    "ParticleStore",
    "resolve_collision",
    "in_contact",
    "step_physics",
    "World",
    "SimulationController",
    "SimState",
    "ReentrantStepError",
    "run_simulation",
    "FrameSnapshot",
    "ParticleSnapshot",
    "SimulationRecording",
    "BaseEvent",
    "CollisionEvent",
    "ConversionEvent",
    "HitWallEvent",
    "SpawnEvent",
    "DestroyEvent",
]
