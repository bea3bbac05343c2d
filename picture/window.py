from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from picture.context import DrawingContext


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @staticmethod
    def from_array(a: np.ndarray) -> "Point":
        a = np.asarray(a, dtype=float).reshape(2,)
        return Point(float(a[0]), float(a[1]))


@dataclass(frozen=True)
class Window:
    """
    Closed axis-aligned rectangle [x_min, x_max] x [y_min, y_max].
    Bound order is not enforced here; consumers expect x_min <= x_max
    and y_min <= y_max.
    """
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def is_degenerate(self) -> bool:
        return self.x_min == self.x_max or self.y_min == self.y_max

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.x_max, self.y_min, self.y_max)


class WindowConfigError(ValueError):
    """
    A window with an empty x or y range was used to scope drawing.
    """
    def __init__(self, axis: str, low: float, high: float):
        self.axis = axis
        self.low = low
        self.high = high
        super().__init__(f"empty {axis}-range in window: {axis}_min = {low!r}, {axis}_max = {high!r}")


PointTransform = Callable[[Point], Point]


def check_window(win: Window) -> Window:
    if win.x_min == win.x_max:
        raise WindowConfigError("x", win.x_min, win.x_max)
    if win.y_min == win.y_max:
        raise WindowConfigError("y", win.y_min, win.y_max)
    return win


def corners(win: Window) -> Tuple[Point, Point, Point, Point]:
    """
    Bottom-right, top-right, top-left, bottom-left (counter-clockwise).
    """
    return (
        Point(win.x_max, win.y_min),
        Point(win.x_max, win.y_max),
        Point(win.x_min, win.y_max),
        Point(win.x_min, win.y_min),
    )


def opposite_corners(win: Window) -> Tuple[Point, Point]:
    return Point(win.x_min, win.y_min), Point(win.x_max, win.y_max)


def from_opposite_corners(p: Point, q: Point) -> Window:
    return Window(
        x_min=min(p.x, q.x),
        x_max=max(p.x, q.x),
        y_min=min(p.y, q.y),
        y_max=max(p.y, q.y),
    )


def inside_window(win: Window, p: Point) -> bool:
    return win.x_min <= p.x <= win.x_max and win.y_min <= p.y <= win.y_max


def outside_window(win: Window, p: Point) -> bool:
    return not inside_window(win, p)


def point_in_window(p: Point, win: Window) -> bool:
    return inside_window(win, p)


def scale_window(k: float, win: Window) -> Window:
    # Scales the raw bounds, so a window off the origin also moves.
    return Window(k * win.x_min, k * win.x_max, k * win.y_min, k * win.y_max)


def transform_window(T: PointTransform, win: Window) -> Window:
    """
    Map the two diagonal corners through T and rebuild from the raw results.
    The result is not normalized: a flipping T gives x_min > x_max.
    """
    lo, hi = opposite_corners(win)
    a = T(lo)
    b = T(hi)
    return Window(a.x, b.x, a.y, b.y)


def window_overlap(w1: Window, w2: Window) -> bool:
    separated = (
        w1.x_max < w2.x_min
        or w2.x_max < w1.x_min
        or w1.y_max < w2.y_min
        or w2.y_max < w1.y_min
    )
    return not separated


def window_center(win: Window) -> Point:
    lo, hi = opposite_corners(win)
    return Point((lo.x + hi.x) / 2.0, (lo.y + hi.y) / 2.0)


def window_from_aspect(
    x_min: float,
    x_max: float,
    y_min: Optional[float] = None,
    aspect_ratio: Optional[float] = None,
    context: Optional["DrawingContext"] = None,
) -> Window:
    """
    Build a window whose height follows from its width and an aspect ratio.

    Without y_min the y range starts at x_min. Without aspect_ratio the
    output size of the drawing context decides it. The width used is
    x_max - y_min, which lines the two ranges up when only x bounds are given.
    """
    if y_min is None and aspect_ratio is None:
        y_min = x_min
    if y_min is None:
        raise TypeError("window_from_aspect() needs y_min when aspect_ratio is given")
    if aspect_ratio is None:
        ctx = _resolve_context(context)
        aspect_ratio = ctx.width / ctx.height
    dx = x_max - y_min
    dy = dx / aspect_ratio
    return Window(x_min, x_max, y_min, y_min + dy)


def device_window(context: Optional["DrawingContext"] = None) -> Window:
    ctx = _resolve_context(context)
    return Window(0.0, float(ctx.width), float(ctx.height), 0.0)


def _resolve_context(context: Optional["DrawingContext"]) -> "DrawingContext":
    if context is not None:
        return context
    from picture.context import get_default_context
    return get_default_context()
