import numpy as np
from .errors import InvalidConfiguration, DegenerateRay
from .vector import vec3, normalize

DEFAULT_FOV = 45.0
DEFAULT_Z_FAR = 1000.0

class FovLimits:
    """The valid field-of-view range, in degrees."""
    __slots__ = ('lower', 'upper')

    def __init__(self, lower: float, upper: float):
        """
        Initializes and validates a field-of-view range.

        Args:
            lower (float): The narrowest allowed angle. Reaching it switches
                           the camera to orthographic projection.
            upper (float): The widest allowed angle.

        Raises:
            InvalidConfiguration: Unless `0 < lower < upper < 180`.
        """
        lower, upper = float(lower), float(upper)
        if not (0.0 < lower < 180.0 and 0.0 < upper < 180.0):
            raise InvalidConfiguration(f"FOV limits must lie strictly within (0, 180), got ({lower}, {upper}).")
        if not lower < upper:
            raise InvalidConfiguration(f"Lower FOV limit must be below the upper limit, got ({lower}, {upper}).")
        self.lower = lower
        self.upper = upper

    @classmethod
    def coerce(cls, value) -> 'FovLimits':
        """Accepts a `FovLimits` or a `(lower, upper)` pair."""
        if isinstance(value, cls):
            return value
        try:
            lower, upper = value
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"FOV limits must be a (lower, upper) pair, got {value!r}.") from None
        return cls(lower, upper)

    def clamp(self, fov: float) -> float:
        from .angles import clamp_fov
        return clamp_fov(fov, self)

    def contains(self, fov: float) -> bool:
        return self.lower <= fov <= self.upper

    def __iter__(self):
        yield self.lower
        yield self.upper

    def __eq__(self, other):
        if not isinstance(other, FovLimits):
            return NotImplemented
        return self.lower == other.lower and self.upper == other.upper

    def __hash__(self):
        return hash((self.lower, self.upper))

    def __repr__(self):
        return f"FovLimits({self.lower}, {self.upper})"

# Standard range when the caller does not pick one.
DEFAULT_FOV_LIMITS = FovLimits(1.0, 90.0)


class CameraState:
    """
    An immutable snapshot of the camera a depth zoom operates on.

    The view ray runs from `position` towards `ray_far_point`, a point far
    along the camera's forward direction (typically the screen centre
    unprojected at the far clip distance). Updating the camera never mutates
    a snapshot; `replace()` and `depth_zoom()` return new ones, and writing
    them back into a live scene is left to the caller.
    """
    __slots__ = ('position', 'ray_far_point', 'fov', 'orthographic', 'orthographic_scale')

    def __init__(self, position, ray_far_point, fov: float = DEFAULT_FOV,
                 orthographic: bool = False, orthographic_scale: float = 1.0):
        """
        Args:
            position (tuple): Camera position in world space.
            ray_far_point (tuple): A point far along the view direction.
            fov (float, optional): Full vertical field of view in degrees.
            orthographic (bool, optional): Whether orthographic projection is in use.
            orthographic_scale (float, optional): Half-height of the orthographic
                                                  view volume. Must be positive
                                                  when `orthographic` is set.
        """
        if orthographic and not orthographic_scale > 0:
            raise InvalidConfiguration(f"Orthographic scale must be positive, got {orthographic_scale}.")
        object.__setattr__(self, 'position', vec3(position))
        object.__setattr__(self, 'ray_far_point', vec3(ray_far_point))
        object.__setattr__(self, 'fov', float(fov))
        object.__setattr__(self, 'orthographic', bool(orthographic))
        object.__setattr__(self, 'orthographic_scale', float(orthographic_scale))

    @classmethod
    def looking_at(cls, position, target, fov: float = DEFAULT_FOV, z_far: float = DEFAULT_Z_FAR, **kwargs) -> 'CameraState':
        """
        Builds a snapshot from a position and a look-at target.

        The ray far point is placed `z_far` units along the direction from
        `position` to `target`.

        Example:
            >>> cam = CameraState.looking_at((0, 0, 3), (0, 0, 0), fov=30)
            >>> cam.ray_far_point
            array([   0.,    0., -997.])
        """
        if not z_far > 0:
            raise InvalidConfiguration(f"Far clip distance must be positive, got {z_far}.")
        position = vec3(position)
        forward = normalize(vec3(target) - position)
        return cls(position, position + forward * z_far, fov=fov, **kwargs)

    def __setattr__(self, name, value):
        raise AttributeError(f"CameraState is immutable; use replace() to change '{name}'.")

    @property
    def mode(self):
        from .projection import ProjectionMode
        return ProjectionMode.ORTHOGRAPHIC if self.orthographic else ProjectionMode.PERSPECTIVE

    @property
    def forward(self) -> np.ndarray:
        """Unit vector along the view ray."""
        return normalize(self.ray_far_point - self.position)

    def replace(self, **changes) -> 'CameraState':
        """Returns a copy with the given fields swapped out."""
        fields = {name: getattr(self, name) for name in self.__slots__}
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown CameraState fields: {', '.join(sorted(unknown))}")
        fields.update(changes)
        return CameraState(**fields)

    def __eq__(self, other):
        if not isinstance(other, CameraState):
            return NotImplemented
        return (np.array_equal(self.position, other.position)
                and np.array_equal(self.ray_far_point, other.ray_far_point)
                and self.fov == other.fov
                and self.orthographic == other.orthographic
                and self.orthographic_scale == other.orthographic_scale)

    __hash__ = None

    def __repr__(self):
        return (f"CameraState(position={self.position.tolist()}, ray_far_point={self.ray_far_point.tolist()}, "
                f"fov={self.fov}, orthographic={self.orthographic}, orthographic_scale={self.orthographic_scale})")


class ZoomRequest:
    """What the caller wants: a point to keep fixed and a new field of view."""
    __slots__ = ('hint_point', 'desired_fov')

    def __init__(self, hint_point, desired_fov: float):
        hint_point = vec3(hint_point)
        if not np.all(np.isfinite(hint_point)):
            raise ValueError(f"Hint point must be finite, got {hint_point.tolist()}.")
        desired_fov = float(desired_fov)
        if np.isnan(desired_fov):
            raise ValueError("Desired FOV must be a number, got NaN.")
        self.hint_point = hint_point
        self.desired_fov = desired_fov

    def __repr__(self):
        return f"ZoomRequest(hint_point={self.hint_point.tolist()}, desired_fov={self.desired_fov})"
