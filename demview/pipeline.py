"""Render pipeline: one entry point selected by render mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np

from .asc import ElevationGrid, read_asc
from .colormap import color_rgb
from .config import RenderConfig
from .derive import blend_hillshade, grayscale_u8, hillshade
from .errors import UnknownModeError
from .stats import valid_range


class Mode(str, Enum):
    GRAYSCALE = "grayscale"
    COLOR = "color"
    HILLSHADE = "hillshade"
    COLOR_HILLSHADE = "color+hillshade"


MODE_NAMES = tuple(mode.value for mode in Mode)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Row-major 8-bit pixels with one (gray) or three (RGB) channels."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    def tobytes(self) -> bytes:
        return self.pixels.tobytes(order="C")


def parse_mode(text: str | Mode) -> Mode:
    """Resolve a mode name such as ``"color+hillshade"``."""

    if isinstance(text, Mode):
        return text
    key = str(text).strip().lower()
    try:
        return Mode(key)
    except ValueError as exc:
        options = ", ".join(MODE_NAMES)
        raise UnknownModeError(f"Unknown mode {text!r}. Use one of: {options}") from exc


def render(grid: ElevationGrid, mode: str | Mode, *, config: RenderConfig | None = None) -> PixelBuffer:
    """Run the mappers for ``mode`` and return a fresh pixel buffer."""

    mode = parse_mode(mode)
    config = config or RenderConfig()

    if mode is Mode.GRAYSCALE:
        pixels = grayscale_u8(grid, valid_range(grid))
    elif mode is Mode.COLOR:
        pixels = color_rgb(grid, valid_range(grid), colormap=config.colormap)
    elif mode is Mode.HILLSHADE:
        pixels = _hillshade(grid, config)
    else:
        rgb = color_rgb(grid, valid_range(grid), colormap=config.colormap)
        pixels = blend_hillshade(rgb, _hillshade(grid, config))
    return PixelBuffer(pixels)


def render_file(path: str | Path, mode: str | Mode, *, config: RenderConfig | None = None) -> PixelBuffer:
    # Mode errors surface before the file is read.
    mode = parse_mode(mode)
    return render(read_asc(path), mode, config=config)


def _hillshade(grid: ElevationGrid, config: RenderConfig) -> np.ndarray:
    return hillshade(
        grid,
        azimuth_deg=config.hillshade_azimuth_deg,
        altitude_deg=config.hillshade_altitude_deg,
        scale=config.hillshade_scale,
    )
