"""Gradient stop records and gradient normalization.

A gradient is an ordered tuple of :class:`GradientStop` values. Series treat
gradients as immutable: assigning a new gradient replaces the tuple, it is
never edited in place.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .Color import RGBA, ColorLike, parse_color
from .InputConvert import InputConvert

Gradient = Tuple["GradientStop", ...]
GradientStopLike = Union["GradientStop", Tuple[Any, ColorLike], Mapping[str, Any]]


@dataclass(frozen=True)
class GradientStop:
    """One ``(offset, color)`` anchor of a piecewise-linear color ramp.

    Parameters
    ----------
    offset : float
        Position of the stop in ``[0, 1]``.
    color : RGBA
        Color at ``offset``.
    """

    offset: float
    color: RGBA

    def __repr__(self) -> str:
        return f"GradientStop(offset={self.offset!r}, color={self.color!r})"


def _coerce_stop(item: GradientStopLike) -> GradientStop:
    if isinstance(item, GradientStop):
        offset, color = item.offset, item.color
    elif isinstance(item, Mapping):
        try:
            offset, color = item["offset"], item["color"]
        except KeyError as e:
            raise ValueError(f"Gradient stop mapping is missing {e.args[0]!r}") from e
    elif isinstance(item, tuple) and len(item) == 2:
        offset, color = item
    else:
        raise TypeError(
            "Gradient stops must be GradientStop, (offset, color) tuples, "
            f"or mappings; got {type(item).__name__}"
        )

    value = InputConvert(offset, float)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Gradient stop offset must be within [0, 1], got {offset!r}")
    return GradientStop(offset=value, color=parse_color(color))


def normalize_gradient(stops: Iterable[GradientStopLike]) -> Gradient:
    """Return ``stops`` as an immutable tuple of :class:`GradientStop`.

    Offsets may be numbers or expression strings (``"1/3"``) and colors any
    notation accepted by :func:`~heatchart.Color.parse_color`. Order is kept
    as given; coverage of ``[0, 1]`` is checked lazily by the interpolator.

    Raises
    ------
    ValueError
        If an offset lies outside ``[0, 1]`` or a color cannot be parsed.
    TypeError
        If an item is not a recognized stop form.
    """
    if isinstance(stops, (str, bytes)):
        raise TypeError("gradient must be an iterable of stops, not a string")
    return tuple(_coerce_stop(item) for item in stops)


__all__ = ["Gradient", "GradientStop", "GradientStopLike", "normalize_gradient"]
