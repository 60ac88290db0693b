"""Cartesian chart orchestration for heat series.

Purpose
-------
This module provides the public ``CartesianChart`` class, the host that owns
axes, the draw area, the series registry and the drawing backend, and runs
render passes over its series.

Concepts and structure
----------------------
The implementation is composition-based:

- ``CartesianChart`` coordinates render passes and exposes the public API.
- ``Axis`` (from ``chart_axis``) owns ranges and linear scaling.
- ``HeatSeries`` (from ``series_heat``) owns points and per-point view state.
- ``PlotlyHeatViewProvider`` (from ``chart_view``) paints cells as shapes on
  a Plotly figure used as a pixel canvas.
- ``UpdateContext`` (from ``chart_context``) carries per-pass state.

Architecture notes
------------------
A render pass is synchronous and runs to completion: seed default gradients,
collect data ranges, fit axes, then update each series in registration
order. Configuration changes arrive as ``SeriesEvent`` values through
listeners the chart registers on each series; they mark the chart stale and
are forwarded to change hooks. Drawing work buffered by view providers is
flushed once at the end of every pass.

Important gotchas
-----------------
- ``ConfigurationError`` from a series propagates out of :meth:`render`;
  series updated before the failure keep their new state.
- Hook callbacks run synchronously when an event is emitted; failures are
  logged and reported with ``warnings.warn`` instead of aborting the caller.

Examples
--------
>>> from heatchart import CartesianChart, HeatSeries
>>> chart = CartesianChart(draw_area_size=(300, 200))
>>> heat = chart.add_series(
...     HeatSeries([(0, 0, 1), (1, 0, 3), (1, 1, 5)], gradient=[(0, "#0000ff"), (1, "#ff0000")]),
...     id="heat",
... )
>>> chart.render()  # doctest: +SKIP
>>> chart  # doctest: +SKIP

Discoverability
---------------
If you are extending behavior, inspect next:

- ``series_heat.py`` for the per-point update loop.
- ``chart_gradient.py`` for weight to color mapping.
- ``chart_geometry.py`` and ``chart_scaling.py`` for cell placement.
"""

from __future__ import annotations

import logging
import time
import warnings
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, Sequence

import plotly.graph_objects as go
from IPython.display import display

from .Color import RGBA, ColorLike, parse_color
from .InputConvert import InputConvert
from .SeriesEvent import SeriesEvent
from .SeriesSnapshot import ChartSnapshot
from .chart_axis import Axis, HORIZONTAL, VERTICAL
from .chart_context import UpdateContext, collect_ranges
from .chart_style import DEFAULT_DRAW_AREA, DEFAULT_PALETTE
from .chart_view import PlotlyHeatViewProvider, ViewProvider, configure_pixel_canvas, erase_view, flush_provider
from .series_heat import HeatSeries, SeriesKind

# Module logger
# - Uses a NullHandler so importing this module never configures global logging.
# - Callers can enable logs via standard logging configuration.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

SeriesHook = Callable[[SeriesEvent], Any]


class CartesianChart:
    """
    A Cartesian chart hosting heat series.

    Parameters
    ----------
    draw_area_size : tuple[float, float], optional
        Width and height of the draw area in pixels.
    invert_xy : bool, optional
        Draw dimension 0 vertically and dimension 1 horizontally.
    x_axes, y_axes : sequence of Axis, optional
        Axes per dimension; a series picks one through ``scales_at``.
    palette : sequence of colors, optional
        Theme colors handed out by :meth:`get_next_color`.
    view_provider : ViewProvider, optional
        Drawing backend injected into every render pass. Defaults to a
        :class:`PlotlyHeatViewProvider` bound to :attr:`figure`.
    """

    def __init__(
        self,
        *,
        draw_area_size: Sequence[Any] = DEFAULT_DRAW_AREA,
        invert_xy: bool = False,
        x_axes: Optional[Sequence[Axis]] = None,
        y_axes: Optional[Sequence[Axis]] = None,
        palette: Optional[Sequence[ColorLike]] = None,
        view_provider: Optional[ViewProvider] = None,
    ) -> None:
        self._draw_area_size = self._coerce_size(draw_area_size)
        self._invert_xy = bool(invert_xy)

        x_list = list(x_axes) if x_axes is not None else [Axis(dimension=0)]
        y_list = list(y_axes) if y_axes is not None else [Axis(dimension=1)]
        for expected, axes in ((0, x_list), (1, y_list)):
            if not axes:
                raise ValueError(f"At least one axis is required for dimension {expected}")
            for axis in axes:
                if axis.dimension != expected:
                    raise ValueError(f"Axis {axis!r} is not a dimension {expected} axis")
        self._dimensions: List[List[Axis]] = [x_list, y_list]

        colors = palette if palette is not None else DEFAULT_PALETTE
        self._palette: tuple[RGBA, ...] = tuple(parse_color(c) for c in colors)
        if not self._palette:
            raise ValueError("palette must contain at least one color")
        self._next_color = 0

        self._figure = configure_pixel_canvas(go.Figure(), self._draw_area_size)
        self._view_provider: ViewProvider = (
            view_provider if view_provider is not None else PlotlyHeatViewProvider(self._figure)
        )

        self._series: Dict[str, HeatSeries] = {}
        self._hooks: Dict[Hashable, SeriesHook] = {}
        self._hook_counter = 0
        self._stale = True

        self._render_info_last_log_t = 0.0
        self._render_debug_last_log_t = 0.0

    # --- Geometry ---

    @staticmethod
    def _coerce_size(size: Sequence[Any]) -> tuple[float, float]:
        if len(size) != 2:
            raise ValueError(f"draw_area_size must be (width, height), got {size!r}")
        width, height = (InputConvert(v, float) for v in size)
        if width <= 0 or height <= 0:
            raise ValueError(f"draw_area_size must be positive, got {size!r}")
        return (width, height)

    @property
    def draw_area_size(self) -> tuple[float, float]:
        """Width and height of the draw area in pixels."""
        return self._draw_area_size

    @draw_area_size.setter
    def draw_area_size(self, value: Sequence[Any]) -> None:
        self._draw_area_size = self._coerce_size(value)
        configure_pixel_canvas(self._figure, self._draw_area_size)
        self._stale = True

    @property
    def invert_xy(self) -> bool:
        """Whether dimension 0 is drawn vertically."""
        return self._invert_xy

    @invert_xy.setter
    def invert_xy(self, value: bool) -> None:
        self._invert_xy = bool(value)
        self._stale = True

    @property
    def dimensions(self) -> List[List[Axis]]:
        """Axes per dimension: ``dimensions[0]`` are x axes, ``dimensions[1]`` y axes."""
        return self._dimensions

    @property
    def x_axis(self) -> Axis:
        return self._dimensions[0][0]

    @property
    def y_axis(self) -> Axis:
        return self._dimensions[1][0]

    @property
    def figure(self) -> go.Figure:
        """Plotly figure the default view provider draws into."""
        return self._figure

    @property
    def view_provider(self) -> ViewProvider:
        return self._view_provider

    @property
    def is_stale(self) -> bool:
        """Whether configuration changed since the last successful render."""
        return self._stale

    def screen_direction(self, axis: Axis) -> int:
        """Return ``HORIZONTAL`` or ``VERTICAL`` for ``axis`` under ``invert_xy``."""
        return VERTICAL if (axis.dimension == 1) != self._invert_xy else HORIZONTAL

    def scale_to_ui(self, value: Any, axis: Axis) -> Any:
        """Map a data value on ``axis`` to a pixel position in the draw area."""
        direction = self.screen_direction(axis)
        return axis.scale_to_ui(value, self._draw_area_size[direction], direction)

    def get_2d_ui_unit_width(self, x_axis: Axis, y_axis: Axis, point_width: Sequence[float]) -> tuple[float, float]:
        """Return the pixel length of one point width on ``x_axis`` and ``y_axis``."""
        widths = []
        for axis, units in ((x_axis, point_width[0]), (y_axis, point_width[1])):
            direction = self.screen_direction(axis)
            widths.append(axis.unit_width(units, self._draw_area_size[direction], direction))
        return widths[0], widths[1]

    # --- Theme ---

    def get_next_color(self) -> RGBA:
        """Return the next palette color, cycling through the palette."""
        color = self._palette[self._next_color % len(self._palette)]
        self._next_color += 1
        return color

    # --- Series registry ---

    @property
    def series(self) -> Dict[str, HeatSeries]:
        """Registered series by id, in registration order."""
        return dict(self._series)

    def add_series(self, series: HeatSeries, id: Optional[str] = None) -> HeatSeries:
        """
        Register ``series`` and return it.

        Parameters
        ----------
        series : HeatSeries
            Series to draw on this chart.
        id : str, optional
            Unique identifier; defaults to ``"series_<n>"``.

        Raises
        ------
        TypeError
            If ``series`` is not a known series kind.
        ValueError
            If ``id`` is already used or a ``scales_at`` index has no axis.
        """
        if not isinstance(getattr(series, "kind", None), SeriesKind):
            raise TypeError(f"Unsupported series type: {type(series).__name__}")
        key = str(id) if id is not None else f"series_{len(self._series) + 1}"
        if key in self._series:
            raise ValueError(f"Series '{key}' already exists")
        for dimension in (0, 1):
            if series.scales_at[dimension] >= len(self._dimensions[dimension]):
                raise ValueError(
                    f"Series '{key}' is scaled at axis {series.scales_at[dimension]} "
                    f"of dimension {dimension}, which does not exist"
                )

        self._series[key] = series
        series.add_listener(self._on_series_event)
        self._stale = True
        return series

    def remove_series(self, id: str) -> HeatSeries:
        """Unregister the series ``id`` and hide the shapes it drew."""
        key = str(id)
        if key not in self._series:
            raise KeyError(f"Unknown series: {key}")
        series = self._series.pop(key)
        series.remove_listener(self._on_series_event)
        for point in series.points:
            erase_view(point.view)
        self._stale = True
        return series

    def __iter__(self) -> Iterator[HeatSeries]:
        return iter(self._series.values())

    def __len__(self) -> int:
        return len(self._series)

    # --- Hooks ---

    def add_series_change_hook(self, callback: SeriesHook, hook_id: Optional[Hashable] = None) -> Hashable:
        """
        Register a callback to run when any series' configuration changes.

        Parameters
        ----------
        callback : callable
            Function with signature ``(event)``.
        hook_id : hashable, optional
            Unique identifier; re-using an id replaces the callback.

        Returns
        -------
        hashable
            The hook identifier used for registration.

        Examples
        --------
        >>> chart = CartesianChart()  # doctest: +SKIP
        >>> chart.add_series_change_hook(lambda event: print(event.name))  # doctest: +SKIP
        'hook:1'
        """
        if hook_id is None:
            self._hook_counter += 1
            hook_id = f"hook:{self._hook_counter}"
        elif isinstance(hook_id, str) and hook_id.startswith("hook:"):
            suffix = hook_id[len("hook:"):]
            if suffix.isdigit():
                self._hook_counter = max(self._hook_counter, int(suffix))
        self._hooks[hook_id] = callback
        return hook_id

    def remove_series_change_hook(self, hook_id: Hashable) -> None:
        """Unregister ``hook_id`` if present."""
        self._hooks.pop(hook_id, None)

    def _on_series_event(self, event: SeriesEvent) -> None:
        self._stale = True
        for hook_id, callback in tuple(self._hooks.items()):
            try:
                callback(event)
            except Exception as e:
                logger.exception(f"series change hook {hook_id!r} failed")
                warnings.warn(f"Series change hook {hook_id!r} failed: {e}")

    # --- Rendering ---

    def render(self, reason: str = "manual") -> None:
        """
        Run one render pass over every registered series.

        Parameters
        ----------
        reason : str, optional
            Render reason string for logging/debugging.

        Raises
        ------
        ConfigurationError
            If a series gradient cannot color one of its points.
        """
        series = list(self._series.values())
        for item in series:
            item.set_default_colors(self)

        ranges = collect_ranges(series)
        for dimension, axes in enumerate(self._dimensions):
            for scale_index, axis in enumerate(axes):
                data_range = ranges[dimension].get(scale_index)
                if data_range is None:
                    axis.fit(None, None)
                else:
                    axis.fit(*data_range)

        context = UpdateContext(ranges=ranges, view_provider=self._view_provider)
        providers = [self._view_provider]
        for item in series:
            if item.view_provider is not None and item.view_provider not in providers:
                providers.append(item.view_provider)
        try:
            for item in series:
                item.update_view(self, context)
        finally:
            for provider in providers:
                flush_provider(provider)

        self._stale = False
        self._log_render(reason)

    def _log_render(self, reason: str) -> None:
        """Log render information with rate-limiting."""
        now = time.monotonic()
        if logger.isEnabledFor(logging.INFO) and (now - self._render_info_last_log_t) > 1.0:
            self._render_info_last_log_t = now
            logger.info(f"render(reason={reason}) series={len(self._series)}")

        if logger.isEnabledFor(logging.DEBUG) and (now - self._render_debug_last_log_t) > 0.5:
            self._render_debug_last_log_t = now
            x, y = self.x_axis, self.y_axis
            logger.debug(
                f"ranges x=({x.actual_min_value}, {x.actual_max_value}) "
                f"y=({y.actual_min_value}, {y.actual_max_value}) invert_xy={self._invert_xy}"
            )

    def snapshot(self) -> ChartSnapshot:
        """Return an immutable snapshot of the chart and its series."""
        return ChartSnapshot(
            draw_area_size=self._draw_area_size,
            invert_xy=self._invert_xy,
            x_ranges=tuple((a.actual_min_value, a.actual_max_value) for a in self._dimensions[0]),
            y_ranges=tuple((a.actual_min_value, a.actual_max_value) for a in self._dimensions[1]),
            series={key: s.snapshot(id=key) for key, s in self._series.items()},
        )

    def _ipython_display_(self, **kwargs: Any) -> None:
        """Render when needed and display the Plotly canvas in IPython."""
        if self._stale:
            self.render(reason="display")
        display(self._figure)

    def __repr__(self) -> str:
        width, height = self._draw_area_size
        return f"CartesianChart(draw_area_size=({width:g}, {height:g}), series={list(self._series)})"


__all__ = ["CartesianChart"]
