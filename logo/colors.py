from __future__ import annotations

from typing import Dict, Sequence, Union
import math
import numpy as np
import matplotlib.colors as mcolors

ColorLike = Union[str, Sequence[float], np.ndarray]

PALETTE: Dict[str, str] = {
    "ink": "#1b1f24",
    "paper": "#ffffff",
    "brand": "#2f6fdb",
    "brand_light": "#7fb2ff",
    "brand_dark": "#173a7a",
    "accent": "#f28c28",
}


def hex_to_rgb(value: str) -> np.ndarray:
    s = value.strip()
    if not s.startswith("#"):
        raise ValueError(f"hex color must start with '#': {value!r}")
    digits = s[1:]
    if len(digits) == 3:
        s = "#" + "".join(ch * 2 for ch in digits)
    elif len(digits) != 6:
        raise ValueError(f"hex color must have 3 or 6 digits: {value!r}")
    try:
        return np.array(mcolors.to_rgb(s), dtype=float)
    except ValueError:
        raise ValueError(f"invalid hex color: {value!r}") from None


def rgb_to_hex(rgb: Sequence[float]) -> str:
    c = np.clip(np.asarray(rgb, dtype=float).reshape(3,), 0.0, 1.0)
    return "#" + "".join(f"{int(round(v * 255)):02x}" for v in c)


def resolve_color(color: ColorLike) -> np.ndarray:
    """
    Palette name, hex string, or RGB triple in [0,1] -> RGB array.
    """
    if isinstance(color, str):
        if color in PALETTE:
            return hex_to_rgb(PALETTE[color])
        if color.startswith("#"):
            return hex_to_rgb(color)
        raise ValueError(f"unknown color {color!r}; expected a palette name or hex string")
    rgb = np.asarray(color, dtype=float).reshape(3,)
    return np.clip(rgb, 0.0, 1.0)


def blend(a: ColorLike, b: ColorLike, t: float) -> np.ndarray:
    t = min(max(float(t), 0.0), 1.0)
    return (1.0 - t) * resolve_color(a) + t * resolve_color(b)


class ColorAlgebra:
    """
    Channel-wise color algebra in [0,1]^3.
      - screen:   1 - (1-a)(1-b)
      - multiply: a * b
    lighten/darken blend toward white/black.
    """
    @staticmethod
    def screen(a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return 1.0 - (1.0 - a) * (1.0 - b)

    @staticmethod
    def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a * b

    @staticmethod
    def lighten(c: ColorLike, amount: float) -> np.ndarray:
        return blend(c, (1.0, 1.0, 1.0), amount)

    @staticmethod
    def darken(c: ColorLike, amount: float) -> np.ndarray:
        return blend(c, (0.0, 0.0, 0.0), amount)


DEFAULT_COLOR_ALGEBRA = ColorAlgebra()


def linear_gradient(start: ColorLike, stop: ColorLike, steps: int) -> np.ndarray:
    if steps < 2:
        raise ValueError("a gradient needs at least 2 steps")
    ts = np.linspace(0.0, 1.0, steps)[:, None]
    return (1.0 - ts) * resolve_color(start) + ts * resolve_color(stop)


def gradient_image(start: ColorLike, stop: ColorLike, width: int, height: int, angle: float = 90.0) -> np.ndarray:
    """
    (height, width, 3) image running from start to stop along angle (degrees).
    Row 0 is the bottom row, for imshow(origin="lower"); 90 runs bottom to top.
    """
    theta = math.radians(angle)
    xs = np.linspace(0.0, 1.0, width)
    ys = np.linspace(0.0, 1.0, height)
    X, Y = np.meshgrid(xs, ys)
    proj = X * math.cos(theta) + Y * math.sin(theta)
    lo, hi = proj.min(), proj.max()
    t = (proj - lo) / (hi - lo) if hi > lo else np.zeros_like(proj)
    c0 = resolve_color(start)
    c1 = resolve_color(stop)
    return (1.0 - t)[:, :, None] * c0 + t[:, :, None] * c1
