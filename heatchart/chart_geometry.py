"""Heat cell geometry derived from axis density.

The cell size is an approximation, not an exact binning: each screen axis is
divided into ``delta + 1`` slots, where ``delta`` is the data span of the axis
drawn along it. A zero span is replaced by the largest finite float so the
cell collapses to a near-zero (but finite, positive) thickness.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

from .chart_axis import Scalable

MAX_FLOAT = float(np.finfo(float).max)


class AxisIndexMap(NamedTuple):
    """Which plotted dimension is drawn horizontally (``xi``) and vertically (``yi``)."""

    xi: int
    yi: int


class CellSize(NamedTuple):
    """Pixel size of one heat cell."""

    width: float
    height: float


def axis_index_map(invert_xy: bool) -> AxisIndexMap:
    """Return ``(0, 1)`` normally and ``(1, 0)`` when axes are inverted."""
    if invert_xy:
        return AxisIndexMap(xi=1, yi=0)
    return AxisIndexMap(xi=0, yi=1)


def axis_deltas(x_axis: Scalable, y_axis: Scalable) -> tuple[float, float]:
    """Return the data span of each axis, substituting ``MAX_FLOAT`` for zero."""
    deltas = []
    for axis in (x_axis, y_axis):
        delta = axis.actual_max_value - axis.actual_min_value
        # exact comparison, a tiny non-zero span is a real span
        deltas.append(MAX_FLOAT if delta == 0 else float(delta))
    return deltas[0], deltas[1]


def build_cell_size(
    x_axis: Scalable,
    y_axis: Scalable,
    draw_area_size: Sequence[float],
    invert_xy: bool = False,
) -> CellSize:
    """Return the heat cell size for the current axis ranges.

    Parameters
    ----------
    x_axis, y_axis : Scalable
        Axes of dimension 0 and 1.
    draw_area_size : sequence of float
        ``(width, height)`` of the draw area in pixels.
    invert_xy : bool
        Whether dimension 0 is drawn vertically.

    Returns
    -------
    CellSize
        ``width = draw_width / (delta[xi] + 1)`` and
        ``height = draw_height / (delta[yi] + 1)``.
    """
    xi, yi = axis_index_map(invert_xy)
    deltas = axis_deltas(x_axis, y_axis)
    width, height = float(draw_area_size[0]), float(draw_area_size[1])
    return CellSize(width=width / (deltas[xi] + 1), height=height / (deltas[yi] + 1))


__all__ = ["AxisIndexMap", "CellSize", "MAX_FLOAT", "axis_deltas", "axis_index_map", "build_cell_size"]
