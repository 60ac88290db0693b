"""Weighted heat series used by :mod:`heatchart.CartesianChart`.

Purpose
-------
Defines ``HeatSeries``, the unit that turns a sequence of ``(x, y, weight)``
values into one colored rectangle per value. The class owns point state and
the per-pass view-state update; the chart owns axes, ranges and drawing
backends.

Concepts and structure
----------------------
Each ``HeatSeries`` instance owns:

- data state (user values and the ``Point`` records built from them),
- configuration state (gradient, fill opacity, blend/normalization rules),
- render state (each point's drawable, view-model and interaction area).

Architecture notes
------------------
The series is composed from small capabilities instead of a class hierarchy:
``Scalable`` axes come from the chart, color lookup is the pure
``interpolate_color`` function, and drawing goes through a ``ViewProvider``
injected by the chart (or given to the series explicitly). ``kind`` tags the
series for the few places that dispatch on series type.

Configuration values are replaced, never mutated. Every replacement emits a
``SeriesEvent`` to the listeners registered by the owning chart.

Important gotchas
-----------------
- ``update_view`` must run sequentially: each point's transition starts from
  the color drawn for it on the previous pass, and drawables receive the
  previous point of the iteration.
- Reassigning ``values`` keeps existing ``Point`` objects by position, so
  drawables and color transitions survive data updates. Drawables of dropped
  points are erased and handed to points added later; a reused drawable
  fades in from transparent like a new one.

Examples
--------
>>> from heatchart import CartesianChart, HeatSeries
>>> chart = CartesianChart(draw_area_size=(300, 200))
>>> series = chart.add_series(HeatSeries([(0, 0, 1), (1, 0, 4), (0, 1, 2)]), id="heat")
>>> chart.render()  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Protocol, TYPE_CHECKING

import numpy as np

from .Color import TRANSPARENT
from .GradientStop import Gradient, GradientStopLike, normalize_gradient
from .InputConvert import InputConvert
from .SeriesEvent import SeriesEvent
from .SeriesSnapshot import SeriesSnapshot
from .chart_context import UpdateContext, empty_coordinates
from .chart_geometry import axis_index_map, build_cell_size
from .chart_gradient import ensure_gradient, interpolate_color
from .chart_points import HeatViewModel, Point, Rectangle, RectangleInteractionArea, WeightedCoordinate
from .chart_scaling import CoordinateScaler
from .chart_style import (
    BLEND_MODES,
    DEFAULT_FILL_OPACITY,
    DEFAULT_POINT_MARGIN,
    DEFAULT_POINT_WIDTH,
    DEFAULT_SCALES_AT,
    NORMALIZATION_MODES,
    resolve_style_aliases,
    validate_mode,
)
from .chart_view import Drawable, ViewProvider, erase_view

if TYPE_CHECKING:
    from .CartesianChart import CartesianChart

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

Mapper = Callable[[Any, int], WeightedCoordinate]
SeriesListener = Callable[[SeriesEvent], None]


class SeriesKind(str, Enum):
    """Tag used where chart code dispatches on the kind of series."""

    HEAT = "heat"


class GradientColored(Protocol):
    """A series whose point colors come from a gradient."""

    gradient: Optional[Gradient]

    def set_default_colors(self, chart: "CartesianChart") -> None: ...


def default_mapper(value: Any, index: int) -> WeightedCoordinate:
    """Build a coordinate from a ``WeightedCoordinate``, a mapping or an ``(x, y, weight)`` sequence."""
    if isinstance(value, WeightedCoordinate):
        return value
    if isinstance(value, Mapping):
        try:
            x, y, weight = value["x"], value["y"], value["weight"]
        except KeyError as e:
            raise ValueError(f"Heat value #{index} is missing {e.args[0]!r}") from e
    elif isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 3:
        x, y, weight = value
    else:
        raise TypeError(
            f"Heat value #{index} must be (x, y, weight), a mapping or a WeightedCoordinate; "
            f"got {type(value).__name__}. Pass mapper= for custom models."
        )
    return WeightedCoordinate(InputConvert(x, float), InputConvert(y, float), InputConvert(weight, float))


class HeatSeries:
    """
    A weighted series drawn as one colored cell per value.

    Conceptually, a ``HeatSeries`` is "one weighted point cloud on one pair of
    axes". On each render pass it:

    - sizes every cell from the density of the axes it is scaled at,
    - places each cell on screen (honoring axis inversion),
    - colors each cell from its weight through the gradient,
    - chains the new color after the previous one for transitions.
    """

    kind = SeriesKind.HEAT
    default_point_width: tuple[float, float] = DEFAULT_POINT_WIDTH
    point_margin: tuple[float, float] = DEFAULT_POINT_MARGIN

    def __init__(
        self,
        values: Iterable[Any] = (),
        *,
        gradient: Optional[Iterable[GradientStopLike]] = None,
        fill_opacity: Optional[float] = None,
        opacity: Optional[float] = None,
        alpha: Optional[float] = None,
        scales_at: Sequence[int] = DEFAULT_SCALES_AT,
        blend: str = "segment",
        normalization: str = "max",
        mapper: Optional[Mapper] = None,
        view_provider: Optional[ViewProvider] = None,
        title: str = "",
    ) -> None:
        """
        Create a heat series.

        Parameters
        ----------
        values : iterable, optional
            User values. By default each value is ``(x, y, weight)``, a
            mapping with those keys, or a :class:`WeightedCoordinate`.
        gradient : iterable of stops, optional
            Ordered ``(offset, color)`` stops covering ``[0, 1]``. When
            omitted, the chart derives one from its palette on first render.
        fill_opacity : float, optional
            Alpha of the offset-0 stop of a palette-derived gradient.
            ``opacity`` and ``alpha`` are aliases.
        scales_at : sequence of int, optional
            Scale index per dimension (x axis, y axis, weight scale).
        blend : {"segment", "legacy"}, optional
            Blend factor rule inside a stop segment.
        normalization : {"max", "range"}, optional
            Weight to offset rule.
        mapper : callable, optional
            ``mapper(value, index) -> WeightedCoordinate`` for custom models.
        view_provider : ViewProvider, optional
            Drawing backend for this series; defaults to the chart's.
        title : str, optional
            Series title metadata.
        """
        self._listeners: List[SeriesListener] = []
        self._points: List[Point] = []
        self._spare_views: List[Drawable] = []
        self._values: tuple[Any, ...] = ()
        self._mapper: Mapper = mapper or default_mapper
        self._view_provider = view_provider
        self.title = title

        scales = tuple(int(InputConvert(s, int, truncate=False)) for s in scales_at)
        if len(scales) != 3:
            raise ValueError(f"scales_at must have 3 entries (x, y, weight), got {len(scales)}")
        self.scales_at: tuple[int, int, int] = scales  # type: ignore[assignment]

        resolved = resolve_style_aliases(fill_opacity=fill_opacity, opacity=opacity, alpha=alpha)
        self._fill_opacity = self._coerce_opacity(DEFAULT_FILL_OPACITY if resolved is None else resolved)
        self._blend = validate_mode("blend", blend, BLEND_MODES)
        self._normalization = validate_mode("normalization", normalization, NORMALIZATION_MODES)
        self._gradient: Optional[Gradient] = None if gradient is None else normalize_gradient(gradient)

        self.values = values

    # --- Configuration ---

    @staticmethod
    def _coerce_opacity(value: Any) -> float:
        opacity = InputConvert(value, float)
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"fill_opacity must be within [0, 1], got {value!r}")
        return opacity

    def _replace(self, name: str, new: Any) -> None:
        attr = f"_{name}"
        old = getattr(self, attr)
        if old == new:
            return
        setattr(self, attr, new)
        self._emit(SeriesEvent(series=self, name=name, old=old, new=new))

    def _emit(self, event: SeriesEvent) -> None:
        for listener in tuple(self._listeners):
            listener(event)

    def add_listener(self, listener: SeriesListener) -> None:
        """Register ``listener`` for :class:`SeriesEvent` notifications."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: SeriesListener) -> None:
        """Unregister ``listener`` if present."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def gradient(self) -> Optional[Gradient]:
        """Ordered gradient stops, or ``None`` before a default is seeded."""
        return self._gradient

    @gradient.setter
    def gradient(self, value: Optional[Iterable[GradientStopLike]]) -> None:
        self._replace("gradient", None if value is None else normalize_gradient(value))

    @property
    def fill_opacity(self) -> float:
        """Alpha of the offset-0 stop of a palette-derived gradient."""
        return self._fill_opacity

    @fill_opacity.setter
    def fill_opacity(self, value: float) -> None:
        self._replace("fill_opacity", self._coerce_opacity(value))

    @property
    def blend(self) -> str:
        return self._blend

    @blend.setter
    def blend(self, value: str) -> None:
        self._replace("blend", validate_mode("blend", value, BLEND_MODES))

    @property
    def normalization(self) -> str:
        return self._normalization

    @normalization.setter
    def normalization(self, value: str) -> None:
        self._replace("normalization", validate_mode("normalization", value, NORMALIZATION_MODES))

    @property
    def view_provider(self) -> Optional[ViewProvider]:
        """Series-specific drawing backend, or ``None`` to use the chart's."""
        return self._view_provider

    # --- Data ---

    @property
    def values(self) -> tuple[Any, ...]:
        """User values the points are built from."""
        return self._values

    @values.setter
    def values(self, values: Iterable[Any]) -> None:
        new_values = tuple(values)
        coordinates = [self._mapper(value, i) for i, value in enumerate(new_values)]

        points = self._points[: len(coordinates)]
        for dropped in self._points[len(coordinates):]:
            if dropped.view is not None:
                erase_view(dropped.view)
                self._spare_views.append(dropped.view)

        for i, (value, coordinate) in enumerate(zip(new_values, coordinates)):
            if i < len(points):
                points[i].model = value
                points[i].coordinate = coordinate
            else:
                view = self._spare_views.pop(0) if self._spare_views else None
                points.append(Point(model=value, coordinate=coordinate, key=i, view=view))

        old = self._values
        self._points = points
        self._values = new_values
        if old or new_values:
            self._emit(SeriesEvent(series=self, name="values", old=old, new=new_values))

    @property
    def points(self) -> tuple[Point, ...]:
        """Points in series order."""
        return tuple(self._points)

    def coordinate_array(self) -> np.ndarray:
        """Return an ``(n, 3)`` array of ``(x, y, weight)`` rows."""
        if not self._points:
            return empty_coordinates()
        return np.array(
            [(p.coordinate.x, p.coordinate.y, p.coordinate.weight) for p in self._points],
            dtype=float,
        )

    # --- Rendering ---

    def set_default_colors(self, chart: "CartesianChart") -> None:
        """Seed a palette-derived gradient when none is configured."""
        if self._gradient is not None:
            return
        theme = chart.get_next_color()
        self._replace("gradient", ensure_gradient(None, theme, self._fill_opacity))
        logger.debug(f"seeded default gradient from {theme.to_css()} (fill_opacity={self._fill_opacity})")

    def update_view(self, chart: "CartesianChart", context: UpdateContext) -> None:
        """
        Recompute every point's view-model and draw it.

        Parameters
        ----------
        chart : CartesianChart
            Owner of axes, draw area size and scale functions.
        context : UpdateContext
            Ranges and the injected view provider for this pass.

        Raises
        ------
        ConfigurationError
            If the gradient has fewer than two stops or does not cover the
            normalized weight of some point. Points before the failing one
            keep their new state.
        """
        x = chart.dimensions[0][self.scales_at[0]]
        y = chart.dimensions[1][self.scales_at[1]]

        indices = axis_index_map(chart.invert_xy)
        cell = build_cell_size(x, y, chart.draw_area_size, chart.invert_xy)
        scaler = CoordinateScaler(chart, x, y, indices, self.default_point_width)

        min_w, max_w = context.range_for(2, self.scales_at[2]) or (0.0, 0.0)
        provider = self._view_provider if self._view_provider is not None else context.view_provider
        gradient = self._gradient or ()

        created = 0
        previous: Optional[Point] = None

        for current in self._points:
            if current.view is None:
                current.view = provider.create_view()
                current.view_model = HeatViewModel(to_color=TRANSPARENT)
                created += 1

            left, top = scaler.cell_origin(current.coordinate)
            seed = current.view_model.to_color if current.view_model is not None else TRANSPARENT

            vm = HeatViewModel(
                rectangle=Rectangle(left, top, cell.width, cell.height),
                from_color=seed,
                to_color=interpolate_color(
                    gradient,
                    min_w,
                    max_w,
                    current.coordinate.weight,
                    blend=self._blend,
                    normalization=self._normalization,
                ),
            )

            current.view_model = vm
            current.view.draw_shape(current, previous)
            current.interaction_area = RectangleInteractionArea(vm.rectangle)

            previous = current

        if created:
            logger.debug(f"created {created} views; cell={cell.width:.3g}x{cell.height:.3g}px")

    def snapshot(self, *, id: str = "") -> SeriesSnapshot:
        """Return an immutable snapshot of this series' configuration and view-models."""
        return SeriesSnapshot(
            id=id,
            kind=self.kind.value,
            gradient=self._gradient,
            fill_opacity=self._fill_opacity,
            scales_at=self.scales_at,
            blend=self._blend,
            normalization=self._normalization,
            view_models=tuple(p.view_model for p in self._points),
        )

    def __repr__(self) -> str:
        return f"HeatSeries(points={len(self._points)}, gradient={self._gradient!r})"


__all__ = ["GradientColored", "HeatSeries", "SeriesKind", "default_mapper"]
