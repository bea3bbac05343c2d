from __future__ import annotations

import numpy as np
import pytest

from logo.colors import (
    DEFAULT_COLOR_ALGEBRA,
    PALETTE,
    blend,
    gradient_image,
    hex_to_rgb,
    linear_gradient,
    resolve_color,
    rgb_to_hex,
)


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#ff0000") == pytest.approx([1.0, 0.0, 0.0])
    assert hex_to_rgb("#0f0") == pytest.approx([0.0, 1.0, 0.0])
    assert hex_to_rgb("#FFFFFF") == pytest.approx([1.0, 1.0, 1.0])


@pytest.mark.parametrize("bad", ["ff0000", "#ff00", "#gg0000", "#12345678", "", "#-12345", "# 1 2 3", "#+1+1+1"])
def test_hex_to_rgb_rejects_malformed(bad: str) -> None:
    with pytest.raises(ValueError):
        hex_to_rgb(bad)


def test_rgb_to_hex_clips() -> None:
    assert rgb_to_hex([1.0, 0.5, 0.0]) == "#ff8000"
    assert rgb_to_hex([2.0, -1.0, 0.0]) == "#ff0000"


def test_palette_colors_parse() -> None:
    for name, value in PALETTE.items():
        assert rgb_to_hex(resolve_color(name)) == value


def test_resolve_color_unknown_name() -> None:
    with pytest.raises(ValueError):
        resolve_color("chartreuse-ish")


def test_blend_clips_t() -> None:
    assert blend("#000000", "#ffffff", 0.5) == pytest.approx([0.5, 0.5, 0.5])
    assert blend("#000000", "#ffffff", 3.0) == pytest.approx([1.0, 1.0, 1.0])
    assert blend("#000000", "#ffffff", -1.0) == pytest.approx([0.0, 0.0, 0.0])


def test_color_algebra() -> None:
    a = np.array([0.5, 0.0, 1.0])
    b = np.array([0.5, 1.0, 0.0])
    assert DEFAULT_COLOR_ALGEBRA.screen(a, b) == pytest.approx([0.75, 1.0, 1.0])
    assert DEFAULT_COLOR_ALGEBRA.multiply(a, b) == pytest.approx([0.25, 0.0, 0.0])
    assert DEFAULT_COLOR_ALGEBRA.lighten("#000000", 0.25) == pytest.approx([0.25] * 3)
    assert DEFAULT_COLOR_ALGEBRA.darken("#ffffff", 0.25) == pytest.approx([0.75] * 3)


def test_linear_gradient_endpoints() -> None:
    g = linear_gradient("#000000", "#ffffff", 5)
    assert g.shape == (5, 3)
    assert g[0] == pytest.approx([0.0, 0.0, 0.0])
    assert g[2] == pytest.approx([0.5, 0.5, 0.5])
    assert g[-1] == pytest.approx([1.0, 1.0, 1.0])
    with pytest.raises(ValueError):
        linear_gradient("#000", "#fff", 1)


def test_gradient_image_runs_bottom_to_top_by_default() -> None:
    img = gradient_image("#000000", "#ffffff", 4, 3)
    assert img.shape == (3, 4, 3)
    assert img[0, 0] == pytest.approx([0.0, 0.0, 0.0])
    assert img[-1, 0] == pytest.approx([1.0, 1.0, 1.0])
    # Constant along each row.
    assert img[1, 0] == pytest.approx(img[1, -1])


def test_gradient_image_horizontal() -> None:
    img = gradient_image("#000000", "#ffffff", 3, 2, angle=0.0)
    assert img[0, 0] == pytest.approx([0.0, 0.0, 0.0])
    assert img[0, -1] == pytest.approx([1.0, 1.0, 1.0])
