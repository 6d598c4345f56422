import pytest
import numpy as np
from depthzoom import (
    CameraState, FovLimits, ZoomRequest, ProjectionMode,
    DEFAULT_FOV_LIMITS, InvalidConfiguration, DegenerateRay, DepthZoomError
)

@pytest.mark.parametrize("lower, upper", [
    (60, 2),
    (30, 30),
    (0, 60),
    (-5, 60),
    (2, 180),
    (2, 200),
    (float('nan'), 60),
])
def test_invalid_limits(lower, upper):
    with pytest.raises(InvalidConfiguration):
        FovLimits(lower, upper)

def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        FovLimits(10, 5)
    assert issubclass(InvalidConfiguration, DepthZoomError)

def test_limits_coerce_and_iterate():
    limits = FovLimits.coerce((2, 60))
    assert limits == FovLimits(2.0, 60.0)
    assert FovLimits.coerce(limits) is limits
    assert tuple(limits) == (2.0, 60.0)
    assert limits.contains(2.0) and limits.contains(60.0)
    assert not limits.contains(1.99)
    with pytest.raises(InvalidConfiguration):
        FovLimits.coerce(5)

def test_default_limits():
    assert tuple(DEFAULT_FOV_LIMITS) == (1.0, 90.0)

def test_camera_state_is_immutable(camera):
    with pytest.raises(AttributeError):
        camera.fov = 10
    with pytest.raises(ValueError):
        camera.position[0] = 1.0

def test_replace_returns_new_snapshot(camera):
    moved = camera.replace(position=(0, 0, 5), fov=20)
    assert np.allclose(moved.position, [0, 0, 5])
    assert moved.fov == 20.0
    assert camera.fov == 30.0
    assert np.allclose(moved.ray_far_point, camera.ray_far_point)
    with pytest.raises(TypeError):
        camera.replace(zoom=2.0)

def test_equality(camera):
    assert camera == CameraState((0, 0, 3), (0, 0, -1000), fov=30)
    assert camera != camera.replace(fov=31)

def test_orthographic_requires_positive_scale():
    with pytest.raises(InvalidConfiguration):
        CameraState((0, 0, 3), (0, 0, -1000), fov=2, orthographic=True, orthographic_scale=0.0)

def test_mode_and_forward(camera):
    assert camera.mode is ProjectionMode.PERSPECTIVE
    ortho = camera.replace(fov=2, orthographic=True, orthographic_scale=0.5)
    assert ortho.mode is ProjectionMode.ORTHOGRAPHIC
    assert np.allclose(camera.forward, [0, 0, -1])
    with pytest.raises(DegenerateRay):
        CameraState((1, 1, 1), (1, 1, 1)).forward

def test_looking_at():
    cam = CameraState.looking_at((0, 0, 3), (0, 0, 0), fov=30, z_far=100)
    assert np.allclose(cam.ray_far_point, [0, 0, -97])
    assert cam.fov == 30.0
    assert not cam.orthographic

def test_looking_at_rejects_bad_input():
    with pytest.raises(DegenerateRay):
        CameraState.looking_at((1, 2, 3), (1, 2, 3))
    with pytest.raises(InvalidConfiguration):
        CameraState.looking_at((0, 0, 3), (0, 0, 0), z_far=0)

def test_zoom_request_converts_values():
    req = ZoomRequest((0, 1, 2), 25)
    assert np.allclose(req.hint_point, [0, 1, 2])
    assert req.desired_fov == 25.0
