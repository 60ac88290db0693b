"""Drawing capabilities and the Plotly heat-cell backend.

Purpose
-------
Series never paint; they hand view-models to ``Drawable`` handles created by
a ``ViewProvider``. The provider is injected per chart (or per series), so
tests can substitute a recording fake and notebooks get Plotly shapes.

Concepts and structure
----------------------
- ``Drawable``: one handle per point, kept across render passes. Handles may
  also provide ``erase()``; see :func:`erase_view`.
- ``ViewProvider``: factory for drawables. Providers may also provide
  ``flush()``, called once at the end of every render pass.
- ``PlotlyHeatView``: draws one ``rect`` layout shape and updates it in place.
- ``PlotlyHeatViewProvider``: creates ``PlotlyHeatView`` handles bound to one
  ``plotly.graph_objects.Figure`` used as a pixel canvas.

Important gotchas
-----------------
- The canvas figure must map pixels 1:1: x range ``[0, width]`` and a
  reversed y range ``[height, 0]`` (see ``configure_pixel_canvas``).
- New Plotly shapes are queued on the provider and appended to the figure in
  one layout assignment by ``flush()``. Until then ``PlotlyHeatView.shape``
  is ``None``.
- ``draw_shape`` receives the previous point of the series as well; the
  Plotly backend does not use it.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence, TYPE_CHECKING

import plotly.graph_objects as go

if TYPE_CHECKING:
    from .chart_points import Point


class Drawable(Protocol):
    """Per-point drawing handle."""

    def draw_shape(self, current: "Point", previous: Optional["Point"]) -> None: ...


class ViewProvider(Protocol):
    """Factory for per-point drawing handles."""

    def create_view(self) -> Drawable: ...


def erase_view(view: Any) -> None:
    """Call ``view.erase()`` when the drawable supports erasing."""
    erase = getattr(view, "erase", None)
    if erase is not None:
        erase()


def flush_provider(provider: Any) -> None:
    """Call ``provider.flush()`` when the provider buffers drawing work."""
    flush = getattr(provider, "flush", None)
    if flush is not None:
        flush()


def configure_pixel_canvas(figure: go.Figure, draw_area_size: Sequence[float]) -> go.Figure:
    """Configure ``figure`` so data coordinates equal draw-area pixels."""
    width, height = float(draw_area_size[0]), float(draw_area_size[1])
    figure.update_layout(
        width=width,
        height=height,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
    )
    figure.update_xaxes(range=[0, width], visible=False, fixedrange=True)
    figure.update_yaxes(range=[height, 0], visible=False, fixedrange=True)
    return figure


class PlotlyHeatView:
    """Draw one heat cell as a Plotly ``rect`` shape.

    The shape is queued on the first draw and updated in place afterwards,
    so one point keeps one shape for its whole lifetime.
    """

    def __init__(self, provider: "PlotlyHeatViewProvider") -> None:
        self._provider = provider
        self._index: Optional[int] = None

    @property
    def _figure(self) -> go.Figure:
        return self._provider.figure

    @property
    def shape(self):
        """Return the Plotly shape drawn by this view, or ``None`` before it is flushed."""
        shapes = self._figure.layout.shapes
        if self._index is None or self._index >= len(shapes):
            return None
        return shapes[self._index]

    def draw_shape(self, current: "Point", previous: Optional["Point"]) -> None:
        vm = current.view_model
        rect = vm.rectangle
        fields = dict(
            x0=rect.left,
            y0=rect.top,
            x1=rect.right,
            y1=rect.bottom,
            fillcolor=vm.to_color.to_css(),
        )
        if self._index is None:
            self._index = self._provider.queue_shape(
                go.layout.Shape(
                    type="rect",
                    xref="x",
                    yref="y",
                    line=dict(width=0),
                    layer="above",
                    **fields,
                )
            )
            return
        self._provider.update_shape(self._index, visible=True, **fields)

    def erase(self) -> None:
        """Hide the shape; it is shown again by the next ``draw_shape``."""
        if self._index is not None:
            self._provider.update_shape(self._index, visible=False)


class PlotlyHeatViewProvider:
    """Create :class:`PlotlyHeatView` handles drawing into ``figure``."""

    def __init__(self, figure: go.Figure) -> None:
        self.figure = figure
        self._pending: List[go.layout.Shape] = []

    def create_view(self) -> PlotlyHeatView:
        return PlotlyHeatView(self)

    def queue_shape(self, shape: go.layout.Shape) -> int:
        """Queue ``shape`` for the next :meth:`flush` and return its shape index."""
        self._pending.append(shape)
        return len(self.figure.layout.shapes) + len(self._pending) - 1

    def update_shape(self, index: int, **fields: Any) -> None:
        """Update the shape at ``index``, whether it is flushed or still queued."""
        flushed = len(self.figure.layout.shapes)
        if index < flushed:
            self.figure.layout.shapes[index].update(**fields)
        else:
            self._pending[index - flushed].update(**fields)

    def flush(self) -> None:
        """Append every queued shape to the figure in one layout assignment."""
        if not self._pending:
            return
        self.figure.layout.shapes = tuple(self.figure.layout.shapes) + tuple(self._pending)
        self._pending.clear()


__all__ = [
    "Drawable",
    "PlotlyHeatView",
    "PlotlyHeatViewProvider",
    "ViewProvider",
    "configure_pixel_canvas",
    "erase_view",
    "flush_provider",
]
