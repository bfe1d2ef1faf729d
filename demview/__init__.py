"""ASC grid terrain rendering package."""

from .asc import AscHeader, ElevationGrid, parse_asc, read_asc
from .config import DEFAULT_COLORMAP, DEFAULT_MODE, RenderConfig, ViewerConfig
from .errors import (
    DemViewError,
    DimensionMismatchError,
    EmptyDataError,
    FormatError,
    UnknownModeError,
)
from .pipeline import Mode, PixelBuffer, parse_mode, render, render_file

__all__ = [
    "AscHeader",
    "ElevationGrid",
    "parse_asc",
    "read_asc",
    "DEFAULT_COLORMAP",
    "DEFAULT_MODE",
    "RenderConfig",
    "ViewerConfig",
    "DemViewError",
    "DimensionMismatchError",
    "EmptyDataError",
    "FormatError",
    "UnknownModeError",
    "Mode",
    "PixelBuffer",
    "parse_mode",
    "render",
    "render_file",
]
