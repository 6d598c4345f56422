import numpy as np
from .errors import DegenerateRay

"""
Small helpers for 3-component vectors.

Vectors are plain numpy float arrays of shape (3,). The ones produced by
`vec3` are marked read-only so a camera snapshot can be handed around
without anyone mutating it in place.
"""

def vec3(value) -> np.ndarray:
    """
    Converts a 3-sequence into a read-only float vector.

    Args:
        value (tuple, list or np.ndarray): The three components.

    Example:
        >>> v = vec3((0, 0, 3))
        >>> v[2]
        3.0
    """
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {arr.shape}.")
    arr.flags.writeable = False
    return arr

X, Y, Z = vec3((1, 0, 0)), vec3((0, 1, 0)), vec3((0, 0, 1))

def dot(a, b) -> float:
    return float(np.dot(a, b))

def length(v) -> float:
    return float(np.linalg.norm(v))

def normalize(v) -> np.ndarray:
    """Returns `v` scaled to unit length. A zero vector has no direction."""
    n = length(v)
    if n == 0: raise DegenerateRay("Cannot normalize a zero-length vector.")
    return vec3(np.asarray(v, dtype=float) / n)

def lerp(a, b, t: float) -> np.ndarray:
    """
    Linear interpolation along the segment from `a` to `b`.

    `t = 0` gives `a`, `t = 1` gives `b`.
    """
    a = np.asarray(a, dtype=float)
    return vec3(a + t * (np.asarray(b, dtype=float) - a))
