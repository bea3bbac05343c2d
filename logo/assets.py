from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Literal, Optional, Sequence, Tuple
import json
import os

BackgroundShape = Literal["none", "square", "rounded", "circle"]
ImageFormat = Literal["png", "svg"]

BACKGROUND_SHAPES = ("none", "square", "rounded", "circle")
IMAGE_FORMATS = ("png", "svg")


@dataclass(frozen=True)
class BackgroundSpec:
    """
    Shape behind the mark, filled with a flat color or a (start, stop) gradient.
    """
    shape: BackgroundShape = "none"
    color: Optional[str] = None
    gradient: Optional[Tuple[str, str]] = None
    corner_radius: float = 0.18

    def __post_init__(self):
        if self.shape not in BACKGROUND_SHAPES:
            raise ValueError(f"unknown background shape {self.shape!r}; expected one of {BACKGROUND_SHAPES}")
        if self.gradient is not None:
            if len(self.gradient) != 2:
                raise ValueError("background gradient needs exactly (start, stop)")
            object.__setattr__(self, "gradient", (str(self.gradient[0]), str(self.gradient[1])))
        if self.shape == "none":
            return
        if self.color is None and self.gradient is None:
            raise ValueError(f"background {self.shape!r} needs a color or a gradient")
        if self.color is not None and self.gradient is not None:
            raise ValueError("background takes a color or a gradient, not both")
        if not 0.0 <= self.corner_radius <= 0.5:
            raise ValueError("corner_radius must be within [0, 0.5]")


@dataclass(frozen=True)
class AssetSpec:
    name: str
    foreground: str
    background: BackgroundSpec = field(default_factory=BackgroundSpec)
    fmt: ImageFormat = "png"
    size: int = 512
    wordmark: Optional[str] = None
    font_family: str = "DejaVu Sans"
    font_weight: str = "bold"
    crop: bool = False
    padding: float = 0.08

    def __post_init__(self):
        if not self.name:
            raise ValueError("asset name must be non-empty")
        if self.fmt not in IMAGE_FORMATS:
            raise ValueError(f"unknown image format {self.fmt!r}; expected one of {IMAGE_FORMATS}")
        if int(self.size) <= 0:
            raise ValueError(f"asset size must be positive, got {self.size}")
        if self.padding < 0.0:
            raise ValueError("padding must be non-negative")

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.fmt}"

    @property
    def aspect(self) -> float:
        # Wordmark banners are three times as wide as they are tall.
        return 3.0 if self.wordmark else 1.0


DEFAULT_ASSETS: List[AssetSpec] = [
    AssetSpec(name="mark", foreground="brand"),
    AssetSpec(name="mark-ink", foreground="ink", crop=True),
    AssetSpec(name="mark-inverted", foreground="paper", background=BackgroundSpec("square", color="ink")),
    AssetSpec(name="avatar", foreground="paper", background=BackgroundSpec("circle", color="brand")),
    AssetSpec(
        name="app-icon",
        foreground="paper",
        background=BackgroundSpec("rounded", gradient=("brand_dark", "brand_light")),
        size=1024,
        padding=0.22,
    ),
    AssetSpec(name="wordmark", foreground="brand", wordmark="picture", size=256),
    AssetSpec(name="wordmark", foreground="brand", wordmark="picture", fmt="svg", size=256),
    AssetSpec(
        name="wordmark-dark",
        foreground="paper",
        background=BackgroundSpec("square", gradient=("ink", "brand_dark")),
        wordmark="picture",
        size=256,
    ),
    AssetSpec(name="favicon", foreground="brand", size=64, padding=0.0, crop=True),
]


def asset_from_dict(d: Dict[str, Any]) -> AssetSpec:
    d = dict(d)
    bg = d.pop("background", None)
    if isinstance(bg, dict):
        try:
            d["background"] = BackgroundSpec(**bg)
        except TypeError as e:
            raise ValueError(f"invalid background for asset {d.get('name', '?')!r}: {e}") from e
    elif isinstance(bg, str):
        d["background"] = BackgroundSpec(shape=bg) if bg == "none" else BackgroundSpec(shape="square", color=bg)
    elif bg is not None:
        raise ValueError(f"background must be an object or a color string, got {type(bg).__name__}")
    if "format" in d and "fmt" not in d:
        d["fmt"] = d.pop("format")
    try:
        return AssetSpec(**d)
    except TypeError as e:
        raise ValueError(f"invalid asset entry {d.get('name', '?')!r}: {e}") from e


def asset_to_dict(spec: AssetSpec) -> Dict[str, Any]:
    d = asdict(spec)
    bg = d["background"]
    if bg.get("gradient") is not None:
        bg["gradient"] = list(bg["gradient"])
    return d


def load_assets(path: str) -> List[AssetSpec]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("assets")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of assets or an object with an 'assets' list")
    return [asset_from_dict(item) for item in data]


def save_assets(specs: Iterable[AssetSpec], path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    payload = {"assets": [asset_to_dict(s) for s in specs]}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def select_assets(specs: Sequence[AssetSpec], names: Iterable[str]) -> List[AssetSpec]:
    wanted = set(names)
    known = {s.name for s in specs}
    missing = sorted(wanted - known)
    if missing:
        raise KeyError(f"unknown asset name(s): {', '.join(missing)}")
    return [s for s in specs if s.name in wanted]
