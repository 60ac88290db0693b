"""Top-level public API for the ``heatchart`` package.

This module re-exports the chart-facing surface so users can import from a
single namespace, for example:

>>> from heatchart import CartesianChart, HeatSeries  # doctest: +SKIP

It exposes both the chart host and the lower-level building blocks (gradient
interpolation, cell geometry, coordinate placement) for integrations that
bring their own chart host.
"""

from .CartesianChart import CartesianChart
from .Color import RGBA, TRANSPARENT, parse_color
from .GradientStop import GradientStop, normalize_gradient
from .InputConvert import InputConvert
from .SeriesEvent import SeriesEvent
from .SeriesSnapshot import ChartSnapshot, SeriesSnapshot
from .chart_axis import Axis, HORIZONTAL, Scalable, VERTICAL
from .chart_context import UpdateContext, collect_ranges
from .chart_geometry import AxisIndexMap, CellSize, axis_deltas, axis_index_map, build_cell_size
from .chart_gradient import blend_factor, ensure_gradient, interpolate_color, normalize_weight
from .chart_points import (
    HeatViewModel,
    Point,
    Rectangle,
    RectangleInteractionArea,
    WeightedCoordinate,
)
from .chart_scaling import CoordinateScaler
from .chart_style import SERIES_STYLE_OPTIONS, resolve_style_aliases
from .chart_view import Drawable, PlotlyHeatView, PlotlyHeatViewProvider, ViewProvider
from .errors import ConfigurationError
from .series_heat import GradientColored, HeatSeries, SeriesKind

__all__ = [
    "Axis",
    "AxisIndexMap",
    "CartesianChart",
    "CellSize",
    "ChartSnapshot",
    "ConfigurationError",
    "CoordinateScaler",
    "Drawable",
    "GradientColored",
    "GradientStop",
    "HORIZONTAL",
    "HeatSeries",
    "HeatViewModel",
    "InputConvert",
    "PlotlyHeatView",
    "PlotlyHeatViewProvider",
    "Point",
    "RGBA",
    "Rectangle",
    "RectangleInteractionArea",
    "SERIES_STYLE_OPTIONS",
    "Scalable",
    "SeriesEvent",
    "SeriesKind",
    "SeriesSnapshot",
    "TRANSPARENT",
    "UpdateContext",
    "VERTICAL",
    "ViewProvider",
    "WeightedCoordinate",
    "axis_deltas",
    "axis_index_map",
    "blend_factor",
    "build_cell_size",
    "collect_ranges",
    "ensure_gradient",
    "interpolate_color",
    "normalize_gradient",
    "normalize_weight",
    "parse_color",
    "resolve_style_aliases",
]
