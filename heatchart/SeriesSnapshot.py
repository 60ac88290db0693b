"""Immutable snapshots of series and chart render state.

A ``SeriesSnapshot`` captures a series' configuration together with the
view-models written by the last render pass; a ``ChartSnapshot`` aggregates
them with the chart-level geometry. Both are frozen and safe to keep after
later render passes replace the live view-models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .GradientStop import Gradient
from .chart_points import HeatViewModel


@dataclass(frozen=True)
class SeriesSnapshot:
    """Immutable record of one series.

    Parameters
    ----------
    id : str
        Series identifier (key in ``CartesianChart.series``).
    kind : str
        Series kind tag (``"heat"``).
    gradient : tuple[GradientStop, ...] or None
        Gradient in effect, or ``None`` if not yet seeded.
    fill_opacity : float
        Alpha of the offset-0 stop for theme-derived gradients.
    scales_at : tuple[int, int, int]
        Scale index per dimension (x, y, weight).
    blend : str
        Blend factor rule.
    normalization : str
        Weight to offset rule.
    view_models : tuple[HeatViewModel or None, ...]
        Last rendered view-model per point, in point order.
    """

    id: str
    kind: str
    gradient: Optional[Gradient]
    fill_opacity: float
    scales_at: Tuple[int, int, int]
    blend: str
    normalization: str
    view_models: Tuple[Optional[HeatViewModel], ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        return (
            f"SeriesSnapshot(id={self.id!r}, kind={self.kind!r}, "
            f"points={len(self.view_models)})"
        )


@dataclass(frozen=True)
class ChartSnapshot:
    """Immutable record of a chart.

    Parameters
    ----------
    draw_area_size : tuple[float, float]
        Draw area in pixels.
    invert_xy : bool
        Whether dimension 0 is drawn vertically.
    x_ranges, y_ranges : tuple[tuple[float, float], ...]
        Actual ``(min, max)`` of every x and y axis after the last render.
    series : dict[str, SeriesSnapshot]
        Mapping of series id to its snapshot, in insertion order.
    """

    draw_area_size: Tuple[float, float]
    invert_xy: bool
    x_ranges: Tuple[Tuple[float, float], ...]
    y_ranges: Tuple[Tuple[float, float], ...]
    series: Dict[str, SeriesSnapshot]

    def __repr__(self) -> str:
        return (
            f"ChartSnapshot(draw_area_size={self.draw_area_size!r}, "
            f"series={len(self.series)})"
        )
