"""Configuration models for terrain rendering."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


DEFAULT_MODE = "grayscale"
DEFAULT_COLORMAP = "turbo"


@dataclass(frozen=True)
class RenderConfig:
    """Light source and gradient settings shared by the mappers."""

    hillshade_azimuth_deg: float = 315.0
    hillshade_altitude_deg: float = 45.0
    hillshade_scale: float = 1.0
    colormap: str = DEFAULT_COLORMAP


@dataclass(frozen=True)
class ViewerConfig:
    """Primary viewer configuration."""

    mode: str = DEFAULT_MODE
    render: RenderConfig = field(default_factory=RenderConfig)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
