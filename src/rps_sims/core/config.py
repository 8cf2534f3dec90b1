# src/rps_sims/core/config.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Mapping

from .kinds import ParticleKind
from rps_sims.utils.preset_loader import load_preset

logger = logging.getLogger(__name__)

SPEED_MIN = 0.5
SPEED_MAX = 10.0
COUNT_MIN = 0
COUNT_MAX = 50

DEFAULT_COUNT = 10


class ConfigError(ValueError):
    """Arena geometry that cannot hold a single particle."""


def clamp_speed(value: float) -> float:
    """Clamp a requested speed into [SPEED_MIN, SPEED_MAX], warning when it moves."""
    v = float(value)
    clamped = min(SPEED_MAX, max(SPEED_MIN, v))
    if clamped != v:
        logger.warning("speed %.3f out of range [%.1f, %.1f], using %.3f", v, SPEED_MIN, SPEED_MAX, clamped)
    return clamped


def clamp_count(value: int, kind: ParticleKind | str | None = None) -> int:
    n = int(value)
    clamped = min(COUNT_MAX, max(COUNT_MIN, n))
    if clamped != n:
        label = ParticleKind.parse(kind).value if kind is not None else "population"
        logger.warning("%s count %d out of range [%d, %d], using %d", label, n, COUNT_MIN, COUNT_MAX, clamped)
    return clamped


def normalize_counts(counts: Mapping[ParticleKind | str, int] | None) -> dict[ParticleKind, int]:
    """Key by ParticleKind, fill missing kinds with 0 and clamp every count."""
    out = {k: 0 for k in ParticleKind}
    for key, n in (counts or {}).items():
        kind = ParticleKind.parse(key)
        out[kind] = clamp_count(n, kind)
    return out


def _default_counts() -> dict[ParticleKind, int]:
    return {k: DEFAULT_COUNT for k in ParticleKind}


@dataclass
class SimConfig:
    width: float = 1200.0
    height: float = 800.0
    radius: float = 5.0
    speed: float = 2.5
    counts: dict[ParticleKind, int] = field(default_factory=_default_counts)
    tick_rate: int = 60          # frames per second the caller's scheduler drives
    record_history: bool = False
    seed: int | None = None

    def __post_init__(self):
        self.width = float(self.width)
        self.height = float(self.height)
        self.radius = float(self.radius)
        if self.radius <= 0:
            raise ConfigError(f"radius must be positive, got {self.radius}")
        if self.width <= 2 * self.radius or self.height <= 2 * self.radius:
            raise ConfigError(
                f"arena {self.width}x{self.height} too small for radius {self.radius}"
            )
        if self.tick_rate <= 0:
            raise ConfigError(f"tick_rate must be positive, got {self.tick_rate}")
        self.speed = clamp_speed(self.speed)
        self.counts = normalize_counts(self.counts)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "SimConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")
        return cls(**dict(data))

    @classmethod
    def from_preset(cls, path: str | Path) -> "SimConfig":
        preset = load_preset(path)
        logger.info("Using preset %s", preset.preset_path)
        return cls.from_mapping(preset.resolved)

    @classmethod
    def from_args(cls, args, base: "SimConfig | None" = None) -> "SimConfig":
        """
        Build a config from an argparse namespace. Arguments left at None keep
        the value from `base` (a preset, or the defaults).
        """
        cfg = base if base is not None else cls()
        kwargs = {}
        for f in fields(cls):
            if f.name == "counts":
                continue
            value = getattr(args, f.name, None)
            if value is not None:
                kwargs[f.name] = value
        counts = dict(cfg.counts)
        for kind in ParticleKind:
            value = getattr(args, kind.value, None)
            if value is not None:
                counts[kind] = value
        kwargs["counts"] = counts
        return replace(cfg, **kwargs)
