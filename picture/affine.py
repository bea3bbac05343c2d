from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import math
import numpy as np

from picture.window import Point, Window, check_window


@dataclass(frozen=True)
class Affine2D:
    """
    2D affine point transform p -> A p + t.
    Instances are callable on Point, so they can be handed to transform_window.
    """
    A: np.ndarray  # shape (2, 2)
    t: np.ndarray  # shape (2,)

    def __post_init__(self):
        A = np.asarray(self.A, dtype=float)
        t = np.asarray(self.t, dtype=float)
        if A.shape != (2, 2):
            raise ValueError("A must be 2x2")
        if t.shape != (2,):
            raise ValueError("t must be length-2")
        object.__setattr__(self, "A", A)
        object.__setattr__(self, "t", t)

    def apply(self, point: Point) -> Point:
        return Point.from_array(self.A @ point.as_array() + self.t)

    def __call__(self, point: Point) -> Point:
        return self.apply(point)

    def apply_many(self, points_xy: np.ndarray) -> np.ndarray:
        pts = np.asarray(points_xy, dtype=float).reshape(-1, 2)
        return pts @ self.A.T + self.t

    def inverse(self) -> "Affine2D":
        cached = self.__dict__.get("_inverse")
        if cached is not None:
            return cached
        if abs(np.linalg.det(self.A)) < 1e-12:
            raise ValueError("transform is singular and has no inverse")
        Ainv = np.linalg.inv(self.A)
        inv = Affine2D(A=Ainv, t=-(Ainv @ self.t))
        object.__setattr__(self, "_inverse", inv)
        return inv

    # ---- Constructors and composition ----
    @staticmethod
    def identity() -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.zeros(2))

    @staticmethod
    def from_translate(dx: float, dy: float) -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.array([dx, dy], dtype=float))

    @staticmethod
    def from_scale(sx: float, sy: Optional[float] = None) -> "Affine2D":
        if sy is None:
            sy = sx
        return Affine2D(A=np.array([[sx, 0.0], [0.0, sy]], dtype=float), t=np.zeros(2))

    @staticmethod
    def from_rotation(theta_radians: float) -> "Affine2D":
        c = math.cos(theta_radians)
        s = math.sin(theta_radians)
        return Affine2D(A=np.array([[c, -s], [s, c]], dtype=float), t=np.zeros(2))

    @staticmethod
    def flip_y(height: float) -> "Affine2D":
        """
        y -> height - y. Turns top-left-origin rows into upward y and back.
        """
        return Affine2D(A=np.array([[1.0, 0.0], [0.0, -1.0]], dtype=float), t=np.array([0.0, height], dtype=float))

    @staticmethod
    def window_to_window(src: Window, dst: Window) -> "Affine2D":
        """
        Axis-wise map sending src's (x_min, y_min) to dst's (x_min, y_min)
        and src's (x_max, y_max) to dst's (x_max, y_max).
        Either window may have flipped bounds; src must not be degenerate.
        """
        check_window(src)
        sx = (dst.x_max - dst.x_min) / (src.x_max - src.x_min)
        sy = (dst.y_max - dst.y_min) / (src.y_max - src.y_min)
        A = np.array([[sx, 0.0], [0.0, sy]], dtype=float)
        t = np.array([dst.x_min - sx * src.x_min, dst.y_min - sy * src.y_min], dtype=float)
        return Affine2D(A=A, t=t)

    def then(self, after: "Affine2D") -> "Affine2D":
        """
        First apply self, then apply 'after'.
        y = after.apply(self.apply(x))
        """
        A_new = after.A @ self.A
        t_new = after.A @ self.t + after.t
        return Affine2D(A=A_new, t=t_new)
