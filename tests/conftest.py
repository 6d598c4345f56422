import pytest
import numpy as np
from depthzoom import CameraState, FovLimits, ZoomRequest

@pytest.fixture
def limits():
    return FovLimits(2, 60)

@pytest.fixture
def camera():
    """Camera three units in front of the origin, looking down -Z."""
    return CameraState(position=(0, 0, 3), ray_far_point=(0, 0, -1000), fov=30)

@pytest.fixture
def origin_request():
    def _request(fov):
        return ZoomRequest(hint_point=(0, 0, 0), desired_fov=fov)
    return _request

@pytest.fixture
def apparent_size():
    """Half-height a plane at `distance` occupies for a camera with `fov` degrees."""
    def _size(fov, distance):
        return distance * np.tan(np.radians(fov) / 2.0)
    return _size
