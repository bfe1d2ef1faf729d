"""CLI entry point for viewing ASC elevation grids."""

from __future__ import annotations

import argparse
import sys
import time

from demview.asc import read_asc
from demview.config import DEFAULT_COLORMAP, DEFAULT_MODE, RenderConfig, ViewerConfig
from demview.errors import EmptyDataError, UnknownModeError
from demview.io import show_buffer
from demview.pipeline import MODE_NAMES, parse_mode, render
from demview.stats import elevation_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an ASC elevation grid as an image")
    parser.add_argument("input_file", help="Path to .asc DEM file")
    parser.add_argument(
        "--mode",
        default=DEFAULT_MODE,
        help=f"Render mode: {' | '.join(MODE_NAMES)}",
    )
    parser.add_argument("--colormap", default=DEFAULT_COLORMAP, help="Matplotlib colormap for color modes")
    parser.add_argument("--azimuth", type=float, default=315.0, help="Hillshade light azimuth in degrees")
    parser.add_argument("--altitude", type=float, default=45.0, help="Hillshade light altitude in degrees")
    parser.add_argument("--scale", type=float, default=1.0, help="Hillshade horizontal cell scale")
    parser.add_argument(
        "--show",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Open the rendered image in the system viewer",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        mode = parse_mode(args.mode)
    except UnknownModeError as exc:
        parser.error(str(exc))

    config = ViewerConfig(
        mode=mode.value,
        render=RenderConfig(
            hillshade_azimuth_deg=args.azimuth,
            hillshade_altitude_deg=args.altitude,
            hillshade_scale=args.scale,
            colormap=args.colormap,
        ),
    )

    try:
        grid = read_asc(args.input_file)
        render_start = time.perf_counter()
        buffer = render(grid, mode, config=config.render)
        render_seconds = time.perf_counter() - render_start
    except OSError as exc:
        print(f"Cannot read {args.input_file}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Cannot render {args.input_file}: {exc}", file=sys.stderr)
        return 1

    print(f"Loaded grid: {grid.width}x{grid.height} ({args.input_file})")
    try:
        stats = elevation_stats(grid)
    except EmptyDataError:
        print(f"Elevation: no valid samples; nodata cells={grid.heights.size}")
    else:
        print(
            "Elevation "
            f"min={stats.minimum:.3f}, "
            f"max={stats.maximum:.3f}, "
            f"mean={stats.mean:.3f}; "
            f"nodata cells={stats.nodata_count}"
        )
    print(f"Rendered {config.mode}: {buffer.width}x{buffer.height}x{buffer.channels} in {render_seconds:.3f} s")

    if args.show:
        show_buffer(buffer, title=f"DEM Viewer - {config.mode}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
