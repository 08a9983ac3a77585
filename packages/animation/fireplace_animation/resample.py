"""Nearest-neighbor frame resampling onto a terminal character grid."""

from __future__ import annotations

import numpy as np

from .models import Frame


def source_indices(source_len: int, dest_len: int) -> np.ndarray:
    """Source coordinate sampled for every destination coordinate along one axis.

    ``floor(i * source_len / dest_len)`` clamped to ``source_len - 1``. The scale
    is computed in floating point, so an identity mapping returns ``0..n-1``.
    """
    if dest_len <= 0:
        return np.zeros(0, dtype=np.intp)
    scale = float(source_len) / float(dest_len)
    idx = np.floor(np.arange(dest_len, dtype=np.float64) * scale).astype(np.intp)
    return np.minimum(idx, source_len - 1)


def resample(frame: Frame, columns: int, rows: int) -> np.ndarray:
    """Map ``frame`` onto a ``rows x columns`` grid of RGB cells.

    Returns a uint8 array of shape ``(rows, columns, 3)``. Zero columns or rows
    yield an empty grid with that shape.
    """
    if columns < 0 or rows < 0:
        raise ValueError(f"Destination size must be non-negative, got {columns}x{rows}")
    if columns == 0 or rows == 0:
        return np.zeros((rows, columns, 3), dtype=np.uint8)

    xs = source_indices(frame.width, columns)
    ys = source_indices(frame.height, rows)
    return frame.pixels[np.ix_(ys, xs)]
