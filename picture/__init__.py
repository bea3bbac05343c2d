# Re-export core window API for convenience
from .window import (
    Point,
    Window,
    WindowConfigError,
    corners,
    opposite_corners,
    from_opposite_corners,
    inside_window,
    outside_window,
    point_in_window,
    scale_window,
    transform_window,
    window_overlap,
    window_center,
    window_from_aspect,
    device_window,
)
from .affine import Affine2D
from .context import (
    DrawingContext,
    get_default_context,
    with_window,
    with_scaled_window,
    with_device_window,
)
