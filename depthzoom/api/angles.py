import numpy as np

def half_radian(degree: float) -> float:
    """Converts a full field-of-view angle in degrees to its half-angle in radians."""
    return degree * np.pi / 180.0 * 0.5

def clamp_fov(desired: float, limits) -> float:
    """
    Restricts a requested field of view to the configured range.

    Requests below the range snap to `limits.lower` and requests above it
    snap to `limits.upper`; anything in between is returned exactly as given.
    Clamping is not an error.

    Args:
        desired (float): The requested field of view in degrees.
        limits (FovLimits or tuple): The `(lower, upper)` range in degrees.
                                     Invalid limits raise `InvalidConfiguration`.

    Example:
        >>> clamp_fov(1.0, (2, 60))
        2.0
    """
    from .camera import FovLimits
    limits = FovLimits.coerce(limits)
    if desired < limits.lower:
        return limits.lower
    if desired > limits.upper:
        return limits.upper
    return desired
