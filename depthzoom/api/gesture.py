from .errors import MissingCameraState
from .camera import FovLimits, ZoomRequest
from .vector import vec3
from .zoom import depth_zoom

DEFAULT_SENSITIVITY = -0.01

def fov_from_drag(current_fov: float, delta_y: float, sensitivity: float = DEFAULT_SENSITIVITY) -> float:
    """
    Maps a vertical drag to a requested field of view.

    With the default sensitivity, dragging up by one unit narrows the view
    by 0.01 degrees. The result is not clamped; `depth_zoom` does that.
    """
    return current_fov + delta_y * sensitivity

class DragZoom:
    """
    Turns drag gestures into depth zoom steps.

    Holds the policy an input layer needs: the angle limits, how strongly a
    drag changes the angle, and the default point to keep fixed.
    """
    def __init__(self, limits=(2.0, 60.0), sensitivity: float = DEFAULT_SENSITIVITY, target=(0.0, 0.0, 0.0)):
        """
        Args:
            limits (FovLimits or tuple, optional): Allowed field of view range.
                                                   Defaults to (2, 60).
            sensitivity (float, optional): Degrees per unit of vertical drag.
                                           Defaults to -0.01.
            target (tuple, optional): Hint point used when a drag supplies none,
                                      e.g. an orbit controller's target.
                                      Defaults to the origin.
        """
        self.limits = FovLimits.coerce(limits)
        self.sensitivity = sensitivity
        self.target = vec3(target)

    def request_for(self, camera, delta_y: float, hint=None) -> ZoomRequest:
        if camera is None:
            raise MissingCameraState("No camera to zoom; attach a camera before handling drags.")
        hint = self.target if hint is None else hint
        return ZoomRequest(hint, fov_from_drag(camera.fov, delta_y, self.sensitivity))

    def on_drag(self, camera, delta_y: float, hint=None, verbose=False):
        """Applies one drag event and returns the resulting `ZoomResult`."""
        return depth_zoom(camera, self.request_for(camera, delta_y, hint), self.limits, verbose=verbose)
