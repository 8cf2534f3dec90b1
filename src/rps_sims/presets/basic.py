from __future__ import annotations
import logging

from rps_sims.core import BoxBoundary, ParticleStore, SimConfig, SimulationController, World
from rps_sims.utils.random import seed_all, rng

logger = logging.getLogger(__name__)


def make_world(sim_config: SimConfig) -> World:
    """Empty arena for `sim_config`, drawing from the named placement/culling streams."""
    boundary = BoxBoundary(width=sim_config.width, height=sim_config.height)
    store = ParticleStore(
        boundary=boundary,
        radius=sim_config.radius,
        placement_rng=rng("placement"),
        culling_rng=rng("culling"),
    )
    return World(boundary=boundary, radius=sim_config.radius, store=store)


def make_controller(sim_config: SimConfig) -> SimulationController:
    """
    Seed the RNG streams from the config (when it carries a seed) and wrap a
    fresh world in a controller. Particles are created on start().
    """
    if sim_config.seed is not None:
        seed_all(sim_config.seed)
    logger.info(
        "Arena %gx%g, radius %g, speed %g",
        sim_config.width, sim_config.height, sim_config.radius, sim_config.speed,
    )
    return SimulationController(sim_config, world=make_world(sim_config))
