"""Derived raster products from elevation grids."""

from __future__ import annotations

import numpy as np

from .asc import ElevationGrid
from .errors import DimensionMismatchError
from .stats import normalize


def grayscale_u8(grid: ElevationGrid, value_range: tuple[float, float] | None = None) -> np.ndarray:
    """Linearly map valid heights onto 0..255; no-data cells are 0.

    The scaled value is truncated, so the valid minimum maps to 0 and the
    maximum to 255. Flat terrain maps every valid cell to 0.
    """

    norm = normalize(grid, value_range)
    return np.clip(norm * 255.0, 0.0, 255.0).astype(np.uint8)


def hillshade(
    grid: ElevationGrid,
    *,
    azimuth_deg: float = 315.0,
    altitude_deg: float = 45.0,
    scale: float = 1.0,
) -> np.ndarray:
    """Compute an 8-bit hillshade with Horn's 3x3 gradient.

    Border rows and columns are left at 0, as are cells whose own height is
    no-data. Neighbours are read as-is, so an interior cell next to no-data
    sees the no-data value in its kernel.

    The illumination angle is ``1 - atan(slope)`` rather than the textbook
    ``atan(slope)``; see DESIGN.md before changing it.
    """

    if scale <= 0:
        raise ValueError("scale must be positive")

    rows, cols = grid.heights.shape
    out = np.zeros((rows, cols), dtype=np.uint8)
    if rows < 3 or cols < 3:
        return out

    nodata = float(grid.nodata_value)
    padded = np.pad(grid.heights.astype(np.float64), 1, mode="constant", constant_values=nodata)

    def neighbour(dx: int, dy: int) -> np.ndarray:
        return padded[1 + dy : 1 + dy + rows, 1 + dx : 1 + dx + cols]

    nw, n, ne = neighbour(-1, -1), neighbour(0, -1), neighbour(1, -1)
    w, e = neighbour(-1, 0), neighbour(1, 0)
    sw, s, se = neighbour(-1, 1), neighbour(0, 1), neighbour(1, 1)

    with np.errstate(invalid="ignore", over="ignore"):
        dz_dx = ((ne + 2.0 * e + se) - (nw + 2.0 * w + sw)) / (8.0 * scale)
        dz_dy = ((sw + 2.0 * s + se) - (nw + 2.0 * n + ne)) / (8.0 * scale)

        slope = np.sqrt(dz_dx**2 + dz_dy**2)
        aspect = np.arctan2(dz_dy, -dz_dx)
        tilt = 1.0 - np.arctan(slope)

        azimuth = np.deg2rad(azimuth_deg)
        altitude = np.deg2rad(altitude_deg)

        shaded = np.sin(altitude) * np.cos(tilt) + np.cos(altitude) * np.sin(tilt) * np.cos(azimuth - aspect)
        shaded = np.maximum(shaded, 0.0)
        shaded = np.nan_to_num(shaded, nan=0.0)
        encoded = np.clip(shaded * 255.0, 0.0, 255.0).astype(np.uint8)

    interior = np.zeros((rows, cols), dtype=bool)
    interior[1:-1, 1:-1] = True
    interior &= grid.valid_mask
    out[interior] = encoded[interior]
    return out


def blend_hillshade(rgb: np.ndarray, shade: np.ndarray) -> np.ndarray:
    """Darken an RGB raster by an 8-bit shade raster, channel by channel."""

    if rgb.ndim != shade.ndim + 1 or rgb.shape[-1] != 3:
        raise DimensionMismatchError(
            f"Color raster must have shape (..., 3) matching the shade raster; got {rgb.shape} and {shade.shape}"
        )
    if rgb.shape[:-1] != shade.shape:
        raise DimensionMismatchError(
            f"Color raster cells {rgb.shape[:-1]} do not match shade raster cells {shade.shape}"
        )

    factor = shade.astype(np.float32) / np.float32(255.0)
    blended = rgb.astype(np.float32) * factor[..., None]
    return blended.astype(np.uint8)
