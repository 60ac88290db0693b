"""Point, coordinate and view-model records for heat series.

Purpose
-------
Defines the data exchanged between a series, its view provider and the
hit-testing collaborators:

- ``WeightedCoordinate``: the immutable ``(x, y, weight)`` data coordinate,
- ``Rectangle``: a screen-space rectangle in pixels (top-left origin),
- ``HeatViewModel``: the transient geometry and colors of one heat cell,
- ``RectangleInteractionArea``: the hit-testing descriptor of one point,
- ``Point``: the mutable per-point render state owned by a series.

Important gotchas
-----------------
- ``HeatViewModel`` is rebuilt on every render pass; ``Point.view_model`` is
  replaced, never edited.
- ``Point.view`` persists across passes so drawing backends can keep identity
  (one shape per point).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, TYPE_CHECKING

from .Color import RGBA, TRANSPARENT

if TYPE_CHECKING:
    from .chart_view import Drawable


@dataclass(frozen=True)
class WeightedCoordinate:
    """Immutable ``(x, y, weight)`` data coordinate.

    Indexing by dimension returns ``x`` for ``0``, ``y`` for ``1`` and
    ``weight`` for ``2``, which is how axis dimensions address coordinates.
    """

    x: float
    y: float
    weight: float

    def __getitem__(self, dimension: int) -> float:
        if dimension == 0:
            return self.x
        if dimension == 1:
            return self.y
        if dimension == 2:
            return self.weight
        raise IndexError(f"WeightedCoordinate has no dimension {dimension!r}")


@dataclass(frozen=True)
class Rectangle:
    """Screen-space rectangle in pixels; ``(x, y)`` is the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


EMPTY_RECTANGLE = Rectangle(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class HeatViewModel:
    """Geometry and colors of one heat cell for a single render pass.

    Parameters
    ----------
    rectangle : Rectangle
        Cell bounds in pixels.
    from_color : RGBA
        Color shown at the start of a transition (the previous pass' target).
    to_color : RGBA
        Color computed from the point weight on this pass.
    """

    rectangle: Rectangle = EMPTY_RECTANGLE
    from_color: RGBA = TRANSPARENT
    to_color: RGBA = TRANSPARENT


@dataclass(frozen=True)
class RectangleInteractionArea:
    """Rectangular hit-testing region of one point."""

    rectangle: Rectangle


@dataclass(eq=False)
class Point:
    """Mutable render state of one series point.

    Parameters
    ----------
    model : Any
        The user value the point was built from.
    coordinate : WeightedCoordinate
        Data coordinate of the point.
    key : int
        Position of the point in its series.
    view : Drawable or None
        Drawing handle, created on the first render.
    view_model : HeatViewModel or None
        State written by the last render.
    interaction_area : RectangleInteractionArea or None
        Hit-testing region written by the last render.
    """

    model: Any
    coordinate: WeightedCoordinate
    key: int = 0
    view: Optional["Drawable"] = None
    view_model: Optional[HeatViewModel] = None
    interaction_area: Optional[RectangleInteractionArea] = field(default=None)

    def __repr__(self) -> str:
        return f"Point(key={self.key!r}, coordinate={self.coordinate!r})"


__all__ = [
    "EMPTY_RECTANGLE",
    "HeatViewModel",
    "Point",
    "Rectangle",
    "RectangleInteractionArea",
    "WeightedCoordinate",
]
