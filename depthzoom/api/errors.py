class DepthZoomError(ValueError):
    """Base class for misuse of the depth zoom API."""


class InvalidConfiguration(DepthZoomError):
    """Raised for field-of-view limits outside 0 < lower < upper < 180."""


class DegenerateRay(DepthZoomError):
    """Raised when a camera's position and ray far point coincide."""


class MissingCameraState(DepthZoomError, TypeError):
    """Raised when no camera snapshot was supplied at all."""


class DegenerateAnchor(DepthZoomError):
    """Raised when the anchor sits on the camera, so no orthographic scale can be derived."""
