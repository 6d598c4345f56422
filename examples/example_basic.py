from depthzoom import *

def main():
    """
    Demonstrates a single depth zoom step.

    This example shows how to:
    - Build a camera snapshot from a position and a look-at target.
    - Narrow the field of view while the camera backs away, so the plane
      through the origin keeps its size on screen.
    """
    cam = CameraState.looking_at(position=(0, 0, 3), target=(0, 0, 0), fov=30)

    result = depth_zoom(cam, ZoomRequest(hint_point=(0, 0, 0), desired_fov=10), limits=(2, 60), verbose=True)

    print(f"FOV {cam.fov:g} -> {result.camera.fov:g}")
    print(f"Position {cam.position.tolist()} -> {result.camera.position.tolist()}")
    return result.camera

if __name__ == "__main__":
    main()
