from __future__ import annotations

import numpy as np
import pytest

from demview.asc import parse_asc
from demview.colormap import color_rgb, gradient_endpoints, gradient_rgb_u8


def _grid(rows: str, ncols: int, nrows: int):
    header = f"ncols {ncols}\nnrows {nrows}\nxllcorner 0\nyllcorner 0\ncellsize 1\nNODATA_value -99999\n"
    return parse_asc(header + rows)


def test_turbo_endpoints() -> None:
    low, high = gradient_endpoints("turbo")

    assert low == (48, 18, 59)
    assert high[0] > high[1] and high[0] > high[2]


def test_color_extremes_hit_gradient_endpoints() -> None:
    rgb = color_rgb(_grid("0 5 10\n", 3, 1))
    low, high = gradient_endpoints()

    assert rgb.shape == (1, 3, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 0]) == low
    assert tuple(rgb[0, 2]) == high


def test_color_nodata_is_black() -> None:
    rgb = color_rgb(_grid("-99999 1\n2 -99999\n", 2, 2))

    assert rgb[0, 0].tolist() == [0, 0, 0]
    assert rgb[1, 1].tolist() == [0, 0, 0]
    assert rgb[0, 1].any()


def test_color_flat_terrain_uses_low_endpoint() -> None:
    rgb = color_rgb(_grid("7 7 7\n7 7 7\n", 3, 2))
    low, _ = gradient_endpoints()

    assert np.all(rgb == np.array(low, dtype=np.uint8))


def test_alternate_colormap_is_used() -> None:
    grid = _grid("0 5 10\n", 3, 1)

    assert not np.array_equal(color_rgb(grid), color_rgb(grid, colormap="viridis"))
    assert gradient_rgb_u8(np.array([0.0]), "gray").tolist() == [[0, 0, 0]]


def test_unknown_colormap_raises_value_error() -> None:
    with pytest.raises(ValueError):
        color_rgb(_grid("0 1\n", 2, 1), colormap="not-a-colormap")


def test_color_nan_sample_is_black() -> None:
    rgb = color_rgb(_grid("0 nan 10\n", 3, 1))
    low, high = gradient_endpoints()

    assert rgb[0, 1].tolist() == [0, 0, 0]
    assert tuple(rgb[0, 0]) == low
    assert tuple(rgb[0, 2]) == high
