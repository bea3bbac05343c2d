from .assets import (
    AssetSpec,
    BackgroundSpec,
    DEFAULT_ASSETS,
    load_assets,
    save_assets,
    select_assets,
)
from .renderer import (
    render_asset,
    render_assets,
    crop_to_content,
)
