"""Perceptual color gradients for elevation rasters."""

from __future__ import annotations

import matplotlib
from matplotlib.colors import Colormap
import numpy as np

from .asc import ElevationGrid
from .config import DEFAULT_COLORMAP
from .stats import normalize


def get_gradient(name: str = DEFAULT_COLORMAP) -> Colormap:
    """Look up a registered matplotlib colormap by name."""

    try:
        return matplotlib.colormaps[name]
    except KeyError as exc:
        raise ValueError(f"Unknown colormap: {name!r}") from exc


def gradient_rgb_u8(t: np.ndarray, name: str = DEFAULT_COLORMAP) -> np.ndarray:
    """Evaluate a gradient at ``t`` in [0, 1] and truncate the channels to 8 bits."""

    rgba = get_gradient(name)(np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0))
    return (rgba[..., :3] * 255.0).astype(np.uint8)


def gradient_endpoints(name: str = DEFAULT_COLORMAP) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    low, high = gradient_rgb_u8(np.array([0.0, 1.0]), name)
    return tuple(int(c) for c in low), tuple(int(c) for c in high)


def color_rgb(
    grid: ElevationGrid,
    value_range: tuple[float, float] | None = None,
    *,
    colormap: str = DEFAULT_COLORMAP,
) -> np.ndarray:
    """Color valid heights through a gradient; no-data and non-finite cells are black."""

    norm = normalize(grid, value_range)
    rgb = gradient_rgb_u8(norm, colormap)
    rgb[grid.missing_mask] = 0
    return rgb
