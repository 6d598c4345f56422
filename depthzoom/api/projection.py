from enum import Enum

class ProjectionMode(str, Enum):
    PERSPECTIVE = 'perspective'
    ORTHOGRAPHIC = 'orthographic'

class ZoomPath(str, Enum):
    """Which of the three update paths a zoom step takes."""
    PERSPECTIVE = 'perspective'
    EXIT_ORTHOGRAPHIC = 'exit_orthographic'
    UNCHANGED = 'unchanged'

def select_path(mode: ProjectionMode, current_fov: float, clamped_fov: float) -> ZoomPath:
    """
    Picks the update path for a zoom step.

    Orthographic projection only ever exists at the lower angle bound, so
    the two modes behave differently:

    - Perspective: always the normal dolly path. If the clamped angle lands
      on the lower bound, that same step switches to orthographic.
    - Orthographic, widening: return to perspective at the lower bound.
      The wider angle itself is not applied until the next step.
    - Orthographic, anything else: nothing changes. With a clamped request
      this can only happen through floating-point noise at the boundary.
    """
    if ProjectionMode(mode) is ProjectionMode.PERSPECTIVE:
        return ZoomPath.PERSPECTIVE
    if clamped_fov - current_fov > 0:
        return ZoomPath.EXIT_ORTHOGRAPHIC
    return ZoomPath.UNCHANGED

def next_mode(path: ZoomPath, clamped_fov: float, lower: float) -> ProjectionMode:
    """The projection mode a camera ends up in after taking `path`."""
    if path is ZoomPath.PERSPECTIVE:
        return ProjectionMode.ORTHOGRAPHIC if clamped_fov == lower else ProjectionMode.PERSPECTIVE
    if path is ZoomPath.EXIT_ORTHOGRAPHIC:
        return ProjectionMode.PERSPECTIVE
    return ProjectionMode.ORTHOGRAPHIC
