"""Error types raised by the rendering core."""

from __future__ import annotations


class DemViewError(Exception):
    """Base class for all core rendering errors."""


class FormatError(DemViewError, ValueError):
    """Raised when an ASC grid header is missing or malformed, or the sample count is wrong."""


class EmptyDataError(DemViewError, ValueError):
    """Raised when a grid has no valid (non no-data) samples."""


class DimensionMismatchError(DemViewError, ValueError):
    """Raised when buffers passed to the compositor do not share a cell layout."""


class UnknownModeError(DemViewError, ValueError):
    """Raised when a render mode name is not recognized."""
