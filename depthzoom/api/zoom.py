from .errors import DegenerateAnchor, MissingCameraState
from .camera import CameraState, FovLimits, ZoomRequest, DEFAULT_FOV_LIMITS
from .angles import clamp_fov, half_radian
from .anchor import AnchorResult, resolve_anchor
from .solver import height_from_distance, distance_from_height, distance_by_angle_change, position_on_ray
from .projection import ProjectionMode, ZoomPath, select_path, next_mode

class ZoomResult:
    """
    The outcome of one depth zoom step.

    `camera` is the updated snapshot, or the very same input snapshot when
    `applied` is False. The result is truthy only when something changed,
    so callers can skip the write-back for no-op steps.
    """
    __slots__ = ('camera', 'path', 'anchor', 'applied')

    def __init__(self, camera: CameraState, path: ZoomPath, anchor: AnchorResult, applied: bool = True):
        self.camera = camera
        self.path = path
        self.anchor = anchor
        self.applied = applied

    def __bool__(self):
        return self.applied

    def __repr__(self):
        return f"ZoomResult(path={self.path.value}, applied={self.applied}, camera={self.camera!r})"

def _move_camera(camera: CameraState, anchor: AnchorResult, new_distance: float, **changes) -> CameraState:
    new_position = position_on_ray(camera.position, camera.ray_far_point, anchor.distance, new_distance)
    # The far point travels with the camera so the ray keeps its direction and length.
    new_far_point = camera.ray_far_point + (new_position - camera.position)
    return camera.replace(position=new_position, ray_far_point=new_far_point, **changes)

def depth_zoom(camera: CameraState, request: ZoomRequest, limits=DEFAULT_FOV_LIMITS, verbose=False) -> ZoomResult:
    """
    Changes the camera's field of view while keeping the plane through the
    anchor point the same apparent size (a dolly zoom).

    The camera slides along its view ray to compensate for the angle change.
    Narrowing down to `limits.lower` switches it to orthographic projection;
    widening from there first returns it to perspective at the lower bound,
    and only a following step actually widens the angle.

    Args:
        camera (CameraState): The current camera snapshot.
        request (ZoomRequest): The hint point and the desired field of view.
                               The desired angle is clamped to `limits`.
        limits (FovLimits or tuple, optional): Allowed `(lower, upper)` field
                                               of view in degrees. Defaults to (1, 90).
        verbose (bool, optional): Print each stage of the update. Defaults to False.

    Returns:
        ZoomResult: The new snapshot together with the path taken.

    Raises:
        InvalidConfiguration: If `limits` is not within 0 < lower < upper < 180.
        MissingCameraState: If `camera` is None.
        DegenerateRay: If the camera position and ray far point coincide.
        DegenerateAnchor: If the step enters orthographic projection with the
                          anchor on the camera position.

    Example:
        >>> cam = CameraState((0, 0, 3), (0, 0, -1000), fov=30)
        >>> result = depth_zoom(cam, ZoomRequest((0, 0, 0), 20), limits=(2, 60))
        >>> result.camera.fov
        20.0
    """
    limits = FovLimits.coerce(limits)
    if camera is None:
        raise MissingCameraState("depth_zoom requires a camera snapshot, got None.")
    if not isinstance(request, ZoomRequest):
        raise TypeError(f"Expected a ZoomRequest, got {type(request).__name__}.")

    new_fov = clamp_fov(request.desired_fov, limits)
    anchor = resolve_anchor(request.hint_point, camera.position, camera.ray_far_point)
    path = select_path(camera.mode, camera.fov, new_fov)
    if verbose:
        print(f"  - Requested FOV {request.desired_fov:g}, clamped to {new_fov:g} within ({limits.lower:g}, {limits.upper:g}).")
        print(f"  - Anchor at {anchor.point.tolist()}, {anchor.distance:g} from the camera.")
        print(f"  - Taking the '{path.value}' path.")

    if path is ZoomPath.UNCHANGED:
        return ZoomResult(camera, path, anchor, applied=False)

    if path is ZoomPath.EXIT_ORTHOGRAPHIC:
        new_distance = distance_from_height(half_radian(limits.lower), camera.orthographic_scale)
        if verbose:
            print(f"  - Leaving orthographic projection at {limits.lower:g} degrees, new distance {new_distance:g}.")
        updated = _move_camera(camera, anchor, new_distance, fov=limits.lower, orthographic=False)
        return ZoomResult(updated, path, anchor)

    new_angle = half_radian(new_fov)
    new_distance = distance_by_angle_change(new_angle, half_radian(camera.fov), anchor.distance)
    scale = height_from_distance(new_angle, new_distance)
    orthographic = next_mode(path, new_fov, limits.lower) is ProjectionMode.ORTHOGRAPHIC
    if orthographic and not scale > 0:
        raise DegenerateAnchor("The anchor coincides with the camera position; cannot derive an orthographic scale.")
    if verbose:
        print(f"  - New distance to anchor {new_distance:g}, orthographic scale {scale:g}.")
    updated = _move_camera(camera, anchor, new_distance, fov=new_fov, orthographic=orthographic,
                           orthographic_scale=scale)
    return ZoomResult(updated, path, anchor)
