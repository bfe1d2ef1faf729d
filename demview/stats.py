"""Valid-range statistics and normalization over no-data masked grids."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .asc import ElevationGrid
from .errors import EmptyDataError


@dataclass(frozen=True)
class ElevationStats:
    """Summary of the valid (non no-data) samples of a grid."""

    minimum: float
    maximum: float
    mean: float
    valid_count: int
    nodata_count: int

    @property
    def relief(self) -> float:
        return self.maximum - self.minimum


def valid_range(grid: ElevationGrid) -> tuple[float, float]:
    """Return ``(min, max)`` over samples not equal to the no-data value."""

    valid = _valid_samples(grid)
    return float(valid.min()), float(valid.max())


def elevation_stats(grid: ElevationGrid) -> ElevationStats:
    """Compute min, max, mean and cell counts over the valid samples."""

    valid = _valid_samples(grid)
    return ElevationStats(
        minimum=float(valid.min()),
        maximum=float(valid.max()),
        mean=float(valid.astype(np.float64).mean()),
        valid_count=int(valid.size),
        nodata_count=int(grid.heights.size - valid.size),
    )


def normalize(grid: ElevationGrid, value_range: tuple[float, float] | None = None) -> np.ndarray:
    """Map heights into ``[0, 1]`` float64; no-data cells and flat terrain map to 0."""

    lo, hi = valid_range(grid) if value_range is None else value_range
    heights = grid.heights.astype(np.float64)
    span = float(hi) - float(lo)
    if span > 0.0:
        norm = np.clip((heights - float(lo)) / span, 0.0, 1.0)
    else:
        norm = np.zeros(heights.shape, dtype=np.float64)
    norm[grid.missing_mask] = 0.0
    return norm


def _valid_samples(grid: ElevationGrid) -> np.ndarray:
    valid = grid.heights[grid.valid_mask]
    if valid.size == 0:
        raise EmptyDataError("Grid has no valid elevation samples (every cell is no-data)")
    return valid
