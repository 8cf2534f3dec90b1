# rps_sims/utils/random.py

from __future__ import annotations

from typing import Dict, Hashable
import numpy as np

_master_seed: int | None = None
_rngs: Dict[str, np.random.Generator] = {}


def seed_all(seed: int | None) -> None:
    """
    Set the master seed for every named RNG stream.

    - If seed is None: streams are entropy-seeded (non-reproducible).
    - Drops cached streams so the next rng(name) call rebuilds them.
    """
    global _master_seed, _rngs
    _master_seed = seed
    _rngs.clear()


def current_seed() -> int | None:
    return _master_seed


def rng(name: str = "placement") -> np.random.Generator:
    """
    Return a named global RNG stream.

    Streams used by the engine:
      - "placement": particle positions and initial velocities
      - "culling":   which particles are removed when a population shrinks
    Draws within one stream are order-dependent; streams are independent of
    each other, so shrinking a population never shifts later placements.
    """
    global _rngs
    if name not in _rngs:
        if _master_seed is None:
            _rngs[name] = np.random.default_rng()
        else:
            ss = np.random.SeedSequence([_master_seed, _stable_int(name)])
            _rngs[name] = np.random.default_rng(ss)
    return _rngs[name]


def _stable_int(x: Hashable) -> int:
    """
    Fold a key into a stable 32-bit integer (FNV-1a) without relying on hash().
    """
    s = repr(x).encode("utf-8", errors="surrogatepass")
    h = 2166136261
    for b in s:
        h ^= b
        h = (h * 16777619) & 0xFFFFFFFF
    return h
