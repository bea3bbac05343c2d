from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from logo import DEFAULT_ASSETS, AssetSpec, load_assets, save_assets, select_assets
from logo.renderer import render_asset
from picture import DrawingContext


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export the logo asset set (PNG/SVG).")
    p.add_argument("--outdir", type=str, default="assets/logo", help="output directory (default: assets/logo)")
    p.add_argument("--config", type=str, default=None, help="JSON asset table (default: built-in asset set)")
    p.add_argument("--only", type=str, nargs="*", default=None, help="render only these asset names")
    p.add_argument("--size", type=int, default=None, help="override the pixel size of every asset")
    p.add_argument("--dump-config", type=str, default=None, help="write the effective asset table to this JSON file and exit")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def effective_assets(args: argparse.Namespace) -> List[AssetSpec]:
    specs = load_assets(args.config) if args.config else list(DEFAULT_ASSETS)
    if args.only:
        specs = select_assets(specs, args.only)
    if args.size is not None:
        specs = [replace(s, size=args.size) for s in specs]
    return specs


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    specs = effective_assets(args)
    if args.dump_config:
        save_assets(specs, args.dump_config)
        print(f"Saved asset table ({len(specs)} assets) -> {args.dump_config}")
        return
    ctx = DrawingContext()
    for i, spec in enumerate(specs):
        out_path = render_asset(spec, args.outdir, context=ctx)
        print(f"[{i + 1}/{len(specs)}] {spec.name} ({spec.fmt}, {spec.size}px) -> {out_path}")
    print(f"Exported {len(specs)} assets to {args.outdir}")


if __name__ == "__main__":
    main()
