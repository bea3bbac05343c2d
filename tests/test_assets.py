from __future__ import annotations

import json

import pytest

from logo.assets import (
    DEFAULT_ASSETS,
    AssetSpec,
    BackgroundSpec,
    asset_from_dict,
    asset_to_dict,
    load_assets,
    save_assets,
    select_assets,
)
from logo.colors import resolve_color


def test_background_defaults_to_none() -> None:
    assert AssetSpec(name="x", foreground="brand").background == BackgroundSpec("none")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"shape": "hexagon", "color": "ink"},
        {"shape": "square"},
        {"shape": "circle", "color": "ink", "gradient": ("ink", "paper")},
        {"shape": "rounded", "color": "ink", "corner_radius": 0.8},
        {"shape": "square", "gradient": ("ink",)},
    ],
)
def test_background_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        BackgroundSpec(**kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "foreground": "ink"},
        {"name": "x", "foreground": "ink", "fmt": "jpg"},
        {"name": "x", "foreground": "ink", "size": 0},
        {"name": "x", "foreground": "ink", "padding": -0.1},
    ],
)
def test_asset_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        AssetSpec(**kwargs)


def test_filename_and_aspect() -> None:
    spec = AssetSpec(name="banner", foreground="ink", fmt="svg", wordmark="picture")
    assert spec.filename == "banner.svg"
    assert spec.aspect == 3.0
    assert AssetSpec(name="m", foreground="ink").aspect == 1.0


def test_default_assets_are_well_formed() -> None:
    filenames = [s.filename for s in DEFAULT_ASSETS]
    assert len(filenames) == len(set(filenames))
    for spec in DEFAULT_ASSETS:
        resolve_color(spec.foreground)
        bg = spec.background
        if bg.color is not None:
            resolve_color(bg.color)
        if bg.gradient is not None:
            for c in bg.gradient:
                resolve_color(c)
    assert {s.fmt for s in DEFAULT_ASSETS} == {"png", "svg"}


def test_asset_from_dict_accepts_shorthands() -> None:
    spec = asset_from_dict({"name": "a", "foreground": "#123456", "background": "#ffffff", "format": "svg"})
    assert spec.fmt == "svg"
    assert spec.background == BackgroundSpec("square", color="#ffffff")
    assert asset_from_dict({"name": "b", "foreground": "ink", "background": "none"}).background.shape == "none"


def test_asset_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="bogus"):
        asset_from_dict({"name": "bogus", "foreground": "ink", "colour": "red"})


def test_dict_round_trip_with_gradient() -> None:
    spec = AssetSpec(
        name="icon",
        foreground="paper",
        background=BackgroundSpec("rounded", gradient=("brand_dark", "brand_light")),
    )
    d = asset_to_dict(spec)
    assert d["background"]["gradient"] == ["brand_dark", "brand_light"]
    json.dumps(d)
    assert asset_from_dict(d) == spec


def test_save_and_load_assets(tmp_path) -> None:
    path = str(tmp_path / "cfg" / "assets.json")
    save_assets(DEFAULT_ASSETS, path)
    assert load_assets(path) == DEFAULT_ASSETS


def test_load_assets_accepts_bare_list(tmp_path) -> None:
    path = tmp_path / "assets.json"
    path.write_text(json.dumps([{"name": "m", "foreground": "ink"}]), encoding="utf-8")
    assert load_assets(str(path)) == [AssetSpec(name="m", foreground="ink")]


def test_load_assets_rejects_other_shapes(tmp_path) -> None:
    path = tmp_path / "assets.json"
    path.write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_assets(str(path))


def test_select_assets_keeps_table_order() -> None:
    picked = select_assets(DEFAULT_ASSETS, ["favicon", "mark"])
    assert [s.name for s in picked] == ["mark", "favicon"]
    assert len(select_assets(DEFAULT_ASSETS, ["wordmark"])) == 2


def test_select_assets_unknown_name() -> None:
    with pytest.raises(KeyError):
        select_assets(DEFAULT_ASSETS, ["mark", "poster"])


def test_asset_from_dict_rejects_misspelled_background_key() -> None:
    with pytest.raises(ValueError, match="colour"):
        asset_from_dict({"name": "a", "foreground": "ink", "background": {"shape": "square", "colour": "red"}})


def test_load_assets_reports_bad_background_as_value_error(tmp_path) -> None:
    path = tmp_path / "assets.json"
    path.write_text(
        json.dumps([{"name": "a", "foreground": "ink", "background": {"shape": "circle", "fill": "ink"}}]),
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="background"):
        load_assets(str(path))
