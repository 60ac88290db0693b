"""Data-to-pixel placement of heat cells.

The numeric scaling itself belongs to the chart; this adapter only decides
which coordinate lands on which screen axis under the current inversion
mapping and shifts the vertical position so the cell origin is its top edge.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from .chart_axis import Axis
from .chart_geometry import AxisIndexMap
from .chart_points import WeightedCoordinate


class ChartScaler(Protocol):
    """The chart capabilities the adapter needs."""

    def scale_to_ui(self, value: float, axis: Axis) -> float: ...

    def get_2d_ui_unit_width(self, x_axis: Axis, y_axis: Axis, point_width: Sequence[float]) -> tuple[float, float]: ...


class CoordinateScaler:
    """Place weighted coordinates on screen for one render pass.

    Parameters
    ----------
    chart : ChartScaler
        Owner of the data-to-pixel scale functions.
    x_axis, y_axis : Axis
        Axes of dimension 0 and 1 the series is scaled at.
    indices : AxisIndexMap
        Mapping computed once per pass by :func:`~heatchart.chart_geometry.axis_index_map`.
    point_width : sequence of float
        Data width of one point along each dimension.
    """

    def __init__(
        self,
        chart: ChartScaler,
        x_axis: Axis,
        y_axis: Axis,
        indices: AxisIndexMap,
        point_width: Sequence[float],
    ) -> None:
        self._chart = chart
        self._x_axis = x_axis
        self._y_axis = y_axis
        self._indices = indices
        self._unit_width = chart.get_2d_ui_unit_width(x_axis, y_axis, point_width)

    @property
    def unit_width(self) -> tuple[float, float]:
        """Pixel width of one point along dimension 0 and 1."""
        return self._unit_width

    def to_pixel(self, coordinate: WeightedCoordinate) -> tuple[float, float]:
        """Return ``(horizontal, vertical)`` pixel position of ``coordinate``."""
        p = (
            self._chart.scale_to_ui(coordinate[0], self._x_axis),
            self._chart.scale_to_ui(coordinate[1], self._y_axis),
        )
        return p[self._indices.xi], p[self._indices.yi]

    def cell_origin(self, coordinate: WeightedCoordinate) -> tuple[float, float]:
        """Return the top-left pixel corner of the cell drawn for ``coordinate``."""
        left, vertical = self.to_pixel(coordinate)
        return left, vertical - self._unit_width[self._indices.yi]


__all__ = ["ChartScaler", "CoordinateScaler"]
