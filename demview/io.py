"""Hand-off of rendered pixel buffers to Pillow."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .pipeline import PixelBuffer


def to_image(buffer: PixelBuffer) -> Image.Image:
    """Wrap a pixel buffer as an ``L`` or ``RGB`` Pillow image."""

    if buffer.channels in (1, 3):
        return Image.fromarray(np.ascontiguousarray(buffer.pixels, dtype=np.uint8))
    raise ValueError(f"Unsupported channel count: {buffer.channels}")


def show_buffer(buffer: PixelBuffer, title: str = "DEM Viewer") -> None:
    to_image(buffer).show(title=title)
