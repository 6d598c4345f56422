import numpy as np
from .vector import vec3, normalize

"""
Right-triangle relations behind the dolly zoom.

All angles here are half field-of-view angles in radians. For a frustum
with half-angle `theta`, the plane at distance `d` from the camera has a
half-height of `d * tan(theta)`. Keeping that height fixed while the angle
changes gives the distance the camera has to move to.
"""

def height_from_distance(angle: float, distance: float) -> float:
    """Half-height of the frustum cross-section at `distance`."""
    return np.tan(angle) * distance

def distance_from_height(angle: float, height: float) -> float:
    """Distance at which the frustum cross-section has half-height `height`."""
    # cotangent form
    return np.tan(np.pi / 2.0 - angle) * height

def distance_by_angle_change(new_angle: float, old_angle: float, old_distance: float) -> float:
    """
    Returns the distance that keeps the plane at `old_distance` the same
    apparent size after the half-angle changes from `old_angle` to `new_angle`.

    A narrower new angle pushes the camera further away; a wider one pulls it closer.

    Example:
        >>> distance_by_angle_change(np.radians(7.5), np.radians(15), 3.0)  # ~6.11
    """
    common_height = height_from_distance(old_angle, old_distance)
    return distance_from_height(new_angle, common_height)

def position_on_ray(ray_start, ray_end, anchor_distance: float, new_distance: float) -> np.ndarray:
    """
    Places the camera `new_distance` in front of the anchor, along the view ray.

    The camera only moves along the view direction: the result is
    `ray_start + forward * (anchor_distance - new_distance)`.
    """
    forward = normalize(np.asarray(ray_end, dtype=float) - np.asarray(ray_start, dtype=float))
    return vec3(forward * (anchor_distance - new_distance) + np.asarray(ray_start, dtype=float))
