# src/rps_sims/core/controller.py

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from enum import Enum
from typing import Mapping

from .boundary import BoxBoundary
from .config import SimConfig, clamp_count, clamp_speed, normalize_counts
from .kinds import ParticleKind
from .recording import FrameSnapshot, SimulationRecording, sole_survivor
from .store import ParticleStore
from .world import World

logger = logging.getLogger(__name__)


class SimState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class ReentrantStepError(RuntimeError):
    """step() was called while another step was still in progress."""


class SimulationController:
    """
    Run / stop / reset lifecycle around a World.

    The driving loop belongs to the caller: while `should_schedule` is True it
    calls step() once per frame, never overlapping two calls.

        ctrl = SimulationController(SimConfig())
        ctrl.start()
        while ctrl.should_schedule:
            frame = ctrl.step()
            ...

    Speed and population requests are clamped into range (with a warning)
    and applied to live particles immediately while running; otherwise they
    take effect at the next start().
    """

    def __init__(self, config: SimConfig | None = None, world: World | None = None):
        self._defaults = config if config is not None else SimConfig()
        self.config = replace(self._defaults)
        self.world = world if world is not None else _build_world(self.config)
        self.state = SimState.IDLE
        self.history: list[dict[ParticleKind, int]] = []
        self._stepping = False

    # ------------------------------------------------------------ properties

    @property
    def is_running(self) -> bool:
        return self.state is SimState.RUNNING

    @property
    def should_schedule(self) -> bool:
        """Whether the external scheduler should request another frame."""
        return self.state is SimState.RUNNING

    @property
    def speed(self) -> float:
        return self.config.speed

    @property
    def requested_counts(self) -> dict[ParticleKind, int]:
        return dict(self.config.counts)

    # ------------------------------------------------------------- lifecycle

    def initialize(self, counts: Mapping[ParticleKind | str, int] | None = None) -> None:
        """
        Materialize particles from `counts` (or the requested counts) at the
        current speed. Does not change the run state: called while idle it
        pre-fills the arena, and start() creates the particles again from
        the requested counts.
        """
        if counts is not None:
            self.config.counts = normalize_counts(counts)
        self.world.initialize(self.config.counts, self.config.speed)

    def start(self) -> None:
        if self.state is SimState.RUNNING:
            logger.warning("start() ignored: simulation already running")
            return
        self.initialize()
        self.state = SimState.RUNNING
        logger.info("Simulation started with %d particles", self.world.n_particles)

    def stop(self) -> None:
        if self.state is not SimState.RUNNING:
            logger.warning("stop() ignored: simulation is %s", self.state.value)
            return
        self.state = SimState.STOPPED
        logger.info("Simulation stopped at tick %d", self.world.tick)

    def reset(self) -> None:
        if self.state is SimState.RUNNING:
            self.stop()
        self.world.clear()
        self.history.clear()
        self.config = replace(self._defaults)
        self.state = SimState.IDLE
        logger.info("Simulation reset")

    # ------------------------------------------------------------ adjustments

    def set_speed(self, value: float) -> None:
        speed = clamp_speed(value)
        self.config.speed = speed
        if self.is_running:
            self.world.store.rescale_all_velocities(speed)

    def set_population(self, kind: ParticleKind | str, count: int) -> None:
        kind = ParticleKind.parse(kind)
        count = clamp_count(count, kind)
        self.config.counts[kind] = count
        if self.is_running:
            self.world.store.resize(kind, count, self.config.speed, tick=self.world.tick)

    # ------------------------------------------------------------------ ticks

    def step(self) -> FrameSnapshot:
        """
        Advance one tick while running and return the frame. When idle or
        stopped, returns the current frozen frame without touching anything.
        """
        if self._stepping:
            raise ReentrantStepError("step() called while a step is in progress")
        self._stepping = True
        try:
            if not self.is_running:
                return self.world.snapshot(with_counts=self.config.record_history)
            events = self.world.step()
            frame = self.world.snapshot(events, with_counts=self.config.record_history)
            if frame.counts is not None:
                self.history.append(dict(frame.counts))
            return frame
        finally:
            self._stepping = False

    def current_counts(self) -> dict[ParticleKind, int]:
        return self.world.counts()


def _build_world(config: SimConfig) -> World:
    boundary = BoxBoundary(width=config.width, height=config.height)
    store = ParticleStore(boundary=boundary, radius=config.radius)
    return World(boundary=boundary, radius=config.radius, store=store)


def run_simulation(
    controller: SimulationController,
    n_steps: int,
    log_interval: int = 600,
    *,
    stop_on_winner: bool = False,
) -> SimulationRecording:
    """
    Drive the controller the way a frame scheduler would: start it if needed,
    then one step per frame for n_steps frames (or until something stops it).
    With stop_on_winner the run also stops once a single kind is left.
    Frames and population history are kept in memory only.
    """
    recording = SimulationRecording()
    if not controller.is_running:
        controller.start()

    for step in range(n_steps):
        if not controller.should_schedule:
            break
        recording.add_frame(controller.step())
        if log_interval and (step + 1) % log_interval == 0:
            counts = controller.current_counts()
            logger.info(
                "tick %d/%d: %s",
                controller.world.tick,
                n_steps,
                ", ".join(f"{k.value}={n}" for k, n in counts.items()),
            )
        if stop_on_winner:
            survivor = sole_survivor(controller.current_counts())
            if survivor is not None:
                logger.info("%s took over the arena at tick %d", survivor.value, controller.world.tick)
                controller.stop()

    recording.meta = {
        "config": asdict(controller.config),
        "ticks": controller.world.tick,
    }
    return recording
