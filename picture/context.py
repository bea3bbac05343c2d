from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, TypeVar
import logging

from picture.affine import Affine2D
from picture.window import (
    Point,
    Window,
    check_window,
    device_window,
    scale_window,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_WINDOW = Window(0.0, 1.0, 0.0, 1.0)


class DrawingContext:
    """
    Output size plus a stack of active windows.

    The active window decides how logical coordinates land on the output.
    Scoped blocks push a window and always pop it on the way out, whether the
    block returns or raises. Not meant to be shared between threads.
    """

    def __init__(self, width: int = 800, height: int = 600, window: Window = DEFAULT_WINDOW):
        self.set_output_size(width, height)
        self._stack: List[Window] = [check_window(window)]

    def set_output_size(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"output size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)

    @property
    def active_window(self) -> Window:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    # ---- Scoped windows ----
    @contextmanager
    def _pushed(self, win: Window) -> Iterator[Window]:
        self._stack.append(win)
        logger.debug("push window %s (depth %d)", win, len(self._stack))
        try:
            yield win
        finally:
            self._stack.pop()
            logger.debug("pop window %s (depth %d)", win, len(self._stack))

    @contextmanager
    def using_window(self, win: Window) -> Iterator[Window]:
        check_window(win)
        with self._pushed(win) as w:
            yield w

    @contextmanager
    def using_scaled_window(self, k: float) -> Iterator[Window]:
        with self.using_window(scale_window(k, self.active_window)) as w:
            yield w

    @contextmanager
    def using_device_window(self) -> Iterator[Window]:
        # Output sizes are validated positive, so this window is never degenerate.
        with self._pushed(device_window(self)) as w:
            yield w

    # ---- Logical <-> device mapping ----
    def device_transform(self) -> Affine2D:
        """
        Affine map from the active window onto output pixels (y grows down).
        """
        return Affine2D.window_to_window(self.active_window, device_window(self))

    def to_device(self, point: Point) -> Point:
        return self.device_transform().apply(point)

    def from_device(self, point: Point) -> Point:
        return self.device_transform().inverse().apply(point)

    def apply_to_axes(self, ax) -> None:
        win = self.active_window
        ax.set_xlim(win.x_min, win.x_max)
        ax.set_ylim(win.y_min, win.y_max)


DEFAULT_CONTEXT = DrawingContext()


def get_default_context() -> DrawingContext:
    return DEFAULT_CONTEXT


def with_window(win: Window, body: Callable[[], T], context: Optional[DrawingContext] = None) -> T:
    ctx = context if context is not None else DEFAULT_CONTEXT
    with ctx.using_window(win):
        return body()


def with_scaled_window(k: float, body: Callable[[], T], context: Optional[DrawingContext] = None) -> T:
    ctx = context if context is not None else DEFAULT_CONTEXT
    with ctx.using_scaled_window(k):
        return body()


def with_device_window(body: Callable[[], T], context: Optional[DrawingContext] = None) -> T:
    ctx = context if context is not None else DEFAULT_CONTEXT
    with ctx.using_device_window():
        return body()
