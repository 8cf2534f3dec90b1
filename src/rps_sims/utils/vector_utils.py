from __future__ import annotations
import numpy as np


def magnitude(v: np.ndarray) -> float:
    return float(np.hypot(v[0], v[1]))


def normalize(v: np.ndarray) -> np.ndarray | None:
    """Unit vector along v, or None when v has zero length."""
    mag = magnitude(v)
    if mag == 0.0:
        return None
    return np.asarray(v, dtype=float) / mag


def perpendicular(n: np.ndarray) -> np.ndarray:
    # rotate +90 degrees: (x, y) -> (-y, x)
    return np.array([-n[1], n[0]], dtype=float)


def project(v: np.ndarray, axis: np.ndarray) -> float:
    """Scalar component of v along a unit axis."""
    return float(np.dot(v, axis))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return magnitude(np.asarray(b, dtype=float) - np.asarray(a, dtype=float))
