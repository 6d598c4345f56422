from .api.errors import DepthZoomError, InvalidConfiguration, DegenerateRay, DegenerateAnchor, MissingCameraState
from .api.vector import vec3, dot, length, normalize, lerp, X, Y, Z
from .api.camera import CameraState, FovLimits, ZoomRequest, DEFAULT_FOV_LIMITS, DEFAULT_FOV, DEFAULT_Z_FAR
from .api.angles import clamp_fov, half_radian
from .api.anchor import AnchorResult, resolve_anchor, closest_point_on_segment
from .api.solver import height_from_distance, distance_from_height, distance_by_angle_change, position_on_ray
from .api.projection import ProjectionMode, ZoomPath, select_path
from .api.zoom import ZoomResult, depth_zoom
from .api.gesture import DragZoom, fov_from_drag
