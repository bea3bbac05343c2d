from __future__ import annotations

from typing import Sequence, Union
import numpy as np
from matplotlib.path import Path
from shapely.geometry import Polygon

from picture import Affine2D, Point, Window

# Size of the square image the outline was traced from, in pixels.
TRACE_SIZE = 256

MARK_WINDOW = Window(0.0, 1.0, 0.0, 1.0)

# Outer contour of the mark, digitized clockwise on the trace image (y grows down).
TRACED_OUTLINE = np.array(
    [
        [128, 20],
        [150, 52],
        [172, 84],
        [192, 118],
        [202, 152],
        [198, 188],
        [180, 218],
        [152, 236],
        [128, 240],
        [104, 236],
        [76, 218],
        [58, 188],
        [54, 152],
        [64, 118],
        [84, 84],
        [106, 52],
    ],
    dtype=float,
)

# Counter cut out of the mark, same orientation as the outer contour.
TRACED_COUNTER = np.array(
    [
        [128, 142],
        [149, 151],
        [158, 172],
        [149, 193],
        [128, 202],
        [107, 193],
        [98, 172],
        [107, 151],
    ],
    dtype=float,
)

PointLike = Union[Point, Sequence[float], np.ndarray]


def trace_to_window(points: np.ndarray, win: Window, trace_size: float = TRACE_SIZE) -> np.ndarray:
    """
    Map trace pixels onto the logical window win, upright.
    """
    trace_window = Window(0.0, float(trace_size), float(trace_size), 0.0)
    return Affine2D.window_to_window(trace_window, win).apply_many(points)


def catmull_rom_to_bezier(points: np.ndarray, closed: bool = True, tension: float = 0.5) -> np.ndarray:
    """
    Cubic Bezier control points of the Catmull-Rom spline through points.
    Returns 1 + 3k rows: the start point, then (c1, c2, end) per segment.
    """
    P = np.asarray(points, dtype=float).reshape(-1, 2)
    n = P.shape[0]
    if n < 3:
        raise ValueError(f"need at least 3 points for a smooth curve, got {n}")
    k = tension / 3.0
    if closed:
        prev = np.roll(P, 1, axis=0)
        nxt = np.roll(P, -1, axis=0)
        nxt2 = np.roll(P, -2, axis=0)
        starts, ends = P, nxt
    else:
        # Endpoints are repeated so the curve starts and ends on them.
        padded = np.vstack([P[:1], P, P[-1:]])
        prev = padded[:-3]
        starts = padded[1:-2]
        ends = padded[2:-1]
        nxt2 = padded[3:]
    c1 = starts + k * (ends - prev)
    c2 = ends - k * (nxt2 - starts)
    segments = np.stack([c1, c2, ends], axis=1).reshape(-1, 2)
    return np.vstack([P[:1], segments])


def bezier_path(*points: PointLike) -> Path:
    """
    Path through cubic Bezier segments: a start point, then three points
    (two controls and an end) per segment.
    """
    n = len(points)
    if n < 4 or (n - 1) % 3 != 0:
        raise TypeError(f"bezier_path() takes 1 + 3k points (k >= 1), got {n}")
    verts = np.array(
        [p.as_array() if isinstance(p, Point) else np.asarray(p, dtype=float).reshape(2,) for p in points],
        dtype=float,
    )
    codes = [Path.MOVETO] + [Path.CURVE4] * (n - 1)
    return Path(verts, codes)


def smooth_outline(points: np.ndarray, closed: bool = True) -> Path:
    ctrl = catmull_rom_to_bezier(points, closed=closed)
    path = bezier_path(*ctrl)
    if not closed:
        return path
    verts = np.vstack([path.vertices, path.vertices[:1]])
    codes = list(path.codes) + [Path.CLOSEPOLY]
    return Path(verts, codes)


def logo_path(win: Window = MARK_WINDOW) -> Path:
    # The counter is reversed so its winding opposes the outer contour and it fills as a hole.
    outer = smooth_outline(trace_to_window(TRACED_OUTLINE, win))
    counter = smooth_outline(trace_to_window(TRACED_COUNTER, win)[::-1])
    return Path.make_compound_path(outer, counter)


def outline_bounds(points: np.ndarray) -> Window:
    minx, miny, maxx, maxy = Polygon(np.asarray(points, dtype=float)).bounds
    return Window(float(minx), float(maxx), float(miny), float(maxy))
