import numpy as np
from .errors import DegenerateRay
from .vector import vec3, dot, length, lerp

class AnchorResult:
    """The point on the view ray that stays visually fixed, and its distance from the camera."""
    __slots__ = ('point', 'distance')

    def __init__(self, point, distance: float):
        self.point = vec3(point)
        self.distance = float(distance)

    def __iter__(self):
        yield self.point
        yield self.distance

    def __repr__(self):
        return f"AnchorResult(point={self.point.tolist()}, distance={self.distance})"

def segment_parameter(point, start, end) -> float:
    """
    Projects `point` onto the segment from `start` to `end`.

    Returns the parameter `t` of the closest point, clamped into [0, 1].
    """
    start = np.asarray(start, dtype=float)
    ab = np.asarray(end, dtype=float) - start
    denom = dot(ab, ab)
    if denom == 0: raise DegenerateRay("View ray start and end coincide.")
    t = dot(np.asarray(point, dtype=float) - start, ab) / denom
    return min(max(t, 0.0), 1.0)

def closest_point_on_segment(point, start, end) -> np.ndarray:
    """
    Finds the point on the segment `start`-`end` nearest to `point`.

    Points behind `start` or beyond `end` snap to that endpoint.

    Example:
        >>> closest_point_on_segment((1, 5, 0), (0, 0, 0), (0, 10, 0))
        array([0., 5., 0.])
    """
    return lerp(start, end, segment_parameter(point, start, end))

def resolve_anchor(hint, ray_start, ray_end) -> AnchorResult:
    """
    Resolves the anchor for a zoom step.

    The caller's hint is only a rough intent signal; the anchor is the point
    on the actual view ray closest to it, so it always lies between the
    camera and the ray's far point.

    Args:
        hint (tuple): Approximate point to keep fixed on screen.
        ray_start (tuple): The camera position.
        ray_end (tuple): A point far along the view direction.

    Raises:
        DegenerateRay: If `ray_start` equals `ray_end`.
    """
    anchor = closest_point_on_segment(hint, ray_start, ray_end)
    return AnchorResult(anchor, length(anchor - np.asarray(ray_start, dtype=float)))
