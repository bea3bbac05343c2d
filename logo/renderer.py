from __future__ import annotations

from typing import Iterable, List, Optional, Tuple
import logging
import os
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch
from matplotlib.path import Path
from PIL import Image
from shapely.geometry import Point as ShapelyPoint, box

from picture import DrawingContext, Point, Window, get_default_context, window_from_aspect
from logo.assets import AssetSpec, BackgroundSpec
from logo.colors import gradient_image, resolve_color
from logo.outline import MARK_WINDOW, TRACED_OUTLINE, logo_path, outline_bounds, trace_to_window

logger = logging.getLogger(__name__)

DPI = 100
GRADIENT_RESOLUTION = 256


def figure_for(spec: AssetSpec, context: DrawingContext) -> Tuple[plt.Figure, plt.Axes]:
    """
    Figure of exactly spec.size pixels high (and aspect times as wide),
    with a frameless axes covering all of it.
    """
    width = int(round(spec.size * spec.aspect))
    height = int(spec.size)
    context.set_output_size(width, height)
    fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    fig.patch.set_alpha(0.0)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.axis("off")
    ax.patch.set_alpha(0.0)
    return fig, ax


def logo_window(spec: AssetSpec, context: DrawingContext) -> Window:
    """
    Window framing the mark with spec.padding on every side. The y range
    starts at -padding and its height follows the output aspect, so wide
    assets extend to the right of the mark.
    """
    pad = spec.padding
    span = (1.0 + 2.0 * pad) * context.width / context.height
    return window_from_aspect(-pad, span - pad, -pad, context=context)


def background_geometry(background: BackgroundSpec, win: Window):
    w = abs(win.width)
    h = abs(win.height)
    x0, x1 = sorted((win.x_min, win.x_max))
    y0, y1 = sorted((win.y_min, win.y_max))
    if background.shape == "square":
        return box(x0, y0, x1, y1)
    if background.shape == "rounded":
        r = background.corner_radius * min(w, h)
        if r <= 0.0:
            return box(x0, y0, x1, y1)
        return box(x0 + r, y0 + r, x1 - r, y1 - r).buffer(r, resolution=32)
    if background.shape == "circle":
        return ShapelyPoint((x0 + x1) / 2.0, (y0 + y1) / 2.0).buffer(min(w, h) / 2.0, resolution=64)
    raise ValueError(f"no geometry for background shape {background.shape!r}")


def draw_background(ax: plt.Axes, background: BackgroundSpec, win: Window) -> None:
    if background.shape == "none":
        return
    geom = background_geometry(background, win)
    path = Path(np.asarray(geom.exterior.coords, dtype=float), closed=True)
    if background.gradient is None:
        ax.add_patch(PathPatch(path, facecolor=resolve_color(background.color), edgecolor="none", zorder=0))
        return
    start, stop = background.gradient
    img = gradient_image(start, stop, GRADIENT_RESOLUTION, GRADIENT_RESOLUTION)
    im = ax.imshow(
        img,
        extent=(win.x_min, win.x_max, win.y_min, win.y_max),
        origin="lower",
        interpolation="bilinear",
        aspect="auto",
        zorder=0,
    )
    clip = PathPatch(path, facecolor="none", edgecolor="none", transform=ax.transData)
    ax.add_patch(clip)
    im.set_clip_path(clip)


def draw_mark(ax: plt.Axes, color, win: Window = MARK_WINDOW) -> None:
    ax.add_patch(PathPatch(logo_path(win), facecolor=resolve_color(color), edgecolor="none", zorder=2))


def draw_wordmark(ax: plt.Axes, spec: AssetSpec, context: DrawingContext) -> None:
    """
    Wordmark text right of the mark, vertically centered on it and sized
    to about half the mark's height on the output.
    """
    bounds = outline_bounds(trace_to_window(TRACED_OUTLINE, MARK_WINDOW))
    top = context.to_device(Point(bounds.x_max, bounds.y_max))
    bottom = context.to_device(Point(bounds.x_max, bounds.y_min))
    mark_px = abs(bottom.y - top.y)
    fontsize = 0.55 * mark_px * 72.0 / DPI
    ax.text(
        bounds.x_max + 0.15,
        (bounds.y_min + bounds.y_max) / 2.0,
        spec.wordmark,
        color=resolve_color(spec.foreground),
        fontsize=fontsize,
        fontfamily=spec.font_family,
        fontweight=spec.font_weight,
        ha="left",
        va="center",
        zorder=2,
    )


def crop_to_content(path: str, margin: int = 0) -> Optional[Tuple[int, int]]:
    """
    Crop a PNG to its non-transparent pixels (plus margin).
    Returns the new (width, height), or None if the image is fully transparent.
    """
    with Image.open(path) as src:
        im = src.convert("RGBA")
    bbox = im.getchannel("A").getbbox()
    if bbox is None:
        return None
    left, top, right, bottom = bbox
    bbox = (
        max(0, left - margin),
        max(0, top - margin),
        min(im.width, right + margin),
        min(im.height, bottom + margin),
    )
    cropped = im.crop(bbox)
    cropped.save(path, format="PNG")
    return cropped.size


def render_asset(spec: AssetSpec, outdir: str, context: Optional[DrawingContext] = None) -> str:
    ctx = context if context is not None else get_default_context()
    os.makedirs(outdir, exist_ok=True)
    out_path = os.path.join(outdir, spec.filename)

    saved_size = (ctx.width, ctx.height)
    fig, ax = figure_for(spec, ctx)
    try:
        with ctx.using_window(logo_window(spec, ctx)) as win:
            draw_background(ax, spec.background, win)
            draw_mark(ax, spec.foreground)
            if spec.wordmark:
                draw_wordmark(ax, spec, ctx)
            ctx.apply_to_axes(ax)
            fig.savefig(out_path, format=spec.fmt, dpi=DPI, transparent=True)
    finally:
        plt.close(fig)
        ctx.set_output_size(*saved_size)

    if spec.crop and spec.fmt == "png":
        size = crop_to_content(out_path)
        logger.debug("cropped %s to %s", out_path, size)
    logger.info("wrote %s", out_path)
    return out_path


def render_assets(specs: Iterable[AssetSpec], outdir: str, context: Optional[DrawingContext] = None) -> List[str]:
    return [render_asset(spec, outdir, context=context) for spec in specs]
