import sys
from depthzoom import *

def main():
    """
    Simulates a vertical drag gesture driving the camera into orthographic
    projection and back out again.

    Each drag event is one call; the returned snapshot is what a viewer
    would write back into its live camera before redrawing.
    """
    controller = DragZoom(limits=(2, 60), target=(0, 0, 0))
    cam = CameraState.looking_at(position=(0, 0, 3), target=(0, 0, 0), fov=30)

    # Drag up hard (narrow to the lower limit), then drag back down twice.
    for delta_y in (1500.0, 1400.0, -500.0, -500.0):
        try:
            result = controller.on_drag(cam, delta_y)
        except DepthZoomError as e:
            print(f"ERROR: Depth zoom failed: {e}", file=sys.stderr)
            return None
        if not result:
            print(f"INFO: drag {delta_y:+g} left the camera unchanged.")
            continue
        cam = result.camera
        mode = cam.mode.value
        print(f"INFO: drag {delta_y:+g} -> fov {cam.fov:g} ({mode}), camera z {cam.position[2]:.3f}")
    return cam

if __name__ == "__main__":
    main()
