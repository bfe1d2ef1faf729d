"""ESRI ASCII grid (.asc) parsing into elevation grids."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .errors import FormatError

HEADER_FIELDS = ("ncols", "nrows", "xllcorner", "yllcorner", "cellsize", "nodata_value")


@dataclass(frozen=True)
class AscHeader:
    """Six-line ASC header. Corner and cell size are kept but unused by the mappers."""

    ncols: int
    nrows: int
    xllcorner: float
    yllcorner: float
    cellsize: float
    nodata_value: float


@dataclass(frozen=True, eq=False)
class ElevationGrid:
    """Row-major elevation samples plus the explicit no-data mask."""

    heights: np.ndarray
    nodata_value: np.float32
    header: AscHeader

    @property
    def width(self) -> int:
        return int(self.heights.shape[1])

    @property
    def height(self) -> int:
        return int(self.heights.shape[0])

    @property
    def samples(self) -> np.ndarray:
        """Flat row-major view of the heights."""

        return self.heights.ravel()

    @property
    def nodata_mask(self) -> np.ndarray:
        return self.heights == self.nodata_value

    @property
    def missing_mask(self) -> np.ndarray:
        """Cells with no elevation: the no-data value, or a non-finite sample such as ``nan``."""

        return self.nodata_mask | ~np.isfinite(self.heights)

    @property
    def valid_mask(self) -> np.ndarray:
        return ~self.missing_mask


def read_asc(path: str | Path) -> ElevationGrid:
    """Read and parse an ASC grid file. ``OSError`` propagates if the file cannot be read."""

    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_asc(text)


def parse_asc(text: str) -> ElevationGrid:
    """Parse ASC grid text into an :class:`ElevationGrid`.

    The header is six lines in fixed order; the value of each line is its last
    whitespace-separated token and the key is not checked. The samples that
    follow are read as one token stream regardless of line breaks.

    Sample tokens that are not valid floats are replaced by the no-data value
    instead of failing the parse. This lenient recovery is deliberate: damaged
    cells render as empty rather than rejecting the whole grid. Header errors
    and a sample count other than ``ncols * nrows`` raise :class:`FormatError`.
    """

    lines = text.splitlines()
    if len(lines) < len(HEADER_FIELDS):
        missing = ", ".join(HEADER_FIELDS[len(lines):])
        raise FormatError(f"ASC header is incomplete; missing: {missing}")

    values = [_header_value(lines[i], name) for i, name in enumerate(HEADER_FIELDS)]
    ncols = _parse_dimension(values[0], "ncols")
    nrows = _parse_dimension(values[1], "nrows")
    xllcorner = _parse_header_float(values[2], "xllcorner")
    yllcorner = _parse_header_float(values[3], "yllcorner")
    cellsize = _parse_header_float(values[4], "cellsize")
    nodata_value = _parse_header_float(values[5], "nodata_value")

    header = AscHeader(ncols, nrows, xllcorner, yllcorner, cellsize, nodata_value)
    nodata = np.float32(nodata_value)

    tokens = " ".join(lines[len(HEADER_FIELDS):]).split()
    expected = ncols * nrows
    if len(tokens) != expected:
        raise FormatError(
            f"ASC grid declares {ncols}x{nrows} = {expected} samples but contains {len(tokens)}"
        )

    samples = _parse_samples(tokens, nodata)
    heights = samples.reshape(nrows, ncols)
    heights.setflags(write=False)
    return ElevationGrid(heights=heights, nodata_value=nodata, header=header)


def _header_value(line: str, name: str) -> str:
    tokens = line.split()
    if not tokens:
        raise FormatError(f"ASC header line for {name} is empty")
    return tokens[-1]


def _parse_dimension(value: str, name: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise FormatError(f"ASC header {name} must be an integer, got {value!r}") from exc
    if parsed <= 0:
        raise FormatError(f"ASC header {name} must be positive, got {parsed}")
    return parsed


def _parse_header_float(value: str, name: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise FormatError(f"ASC header {name} must be numeric, got {value!r}") from exc


def _parse_samples(tokens: list[str], nodata: np.float32) -> np.ndarray:
    values = [_sample_value(token, nodata) for token in tokens]
    # Magnitudes beyond float32 become inf and are treated as missing.
    with np.errstate(over="ignore"):
        return np.array(values, dtype=np.float32)


def _sample_value(token: str, nodata: np.float32) -> float:
    try:
        return float(token)
    except ValueError:
        return float(nodata)
