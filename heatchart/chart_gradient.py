"""Gradient color interpolation for heat series.

Purpose
-------
Maps a point weight to a color by walking an ordered list of gradient stops
and blending the two stops that bracket the normalized weight. Also provides
the fallback two-stop gradient built from a theme color.

Architecture notes
------------------
Everything here is a pure function of its inputs, so it can be called from any
thread and unit-tested without a chart.

Two behaviors are selectable because the original arithmetic is ambiguous:

- ``normalization``: ``"max"`` maps ``weight / max_weight`` (``min_weight`` is
  accepted and ignored, weights are assumed non-negative); ``"range"`` maps
  ``(weight - min) / (max - min)``.
- ``blend``: ``"segment"`` blends locally between the bracketing stops;
  ``"legacy"`` uses the global offset as blend factor, which is what the
  historical formula reduces to.

Examples
--------
>>> from heatchart.Color import RGBA
>>> from heatchart.GradientStop import GradientStop
>>> stops = (GradientStop(0.0, RGBA(0, 0, 0, 0)), GradientStop(1.0, RGBA(255, 0, 0)))
>>> interpolate_color(stops, 0, 10, 5)
RGBA(r=128, g=0, b=0, a=128)
"""

from __future__ import annotations

from typing import Optional, Sequence

from .Color import RGBA
from .GradientStop import Gradient, GradientStop
from .chart_style import BLEND_MODES, NORMALIZATION_MODES, validate_mode
from .errors import ConfigurationError


def normalize_weight(
    min_weight: float,
    max_weight: float,
    weight: float,
    normalization: str = "max",
) -> float:
    """Return the gradient offset for ``weight``.

    Parameters
    ----------
    min_weight, max_weight : float
        Weight range of the active weight scale.
    weight : float
        Weight of the point being colored.
    normalization : {"max", "range"}, default="max"
        Mapping rule. ``"max"`` ignores ``min_weight``.

    Returns
    -------
    float
        Offset to look up in the gradient; ``0.0`` when the range is empty.
    """
    mode = validate_mode("normalization", normalization, NORMALIZATION_MODES)
    if mode == "range":
        span = max_weight - min_weight
        if span == 0:
            return 0.0
        return (weight - min_weight) / span
    if max_weight == 0:
        return 0.0
    return weight / max_weight


def blend_factor(offset: float, start: GradientStop, end: GradientStop, blend: str = "segment") -> float:
    """Return the blend factor between ``start`` and ``end`` for ``offset``."""
    mode = validate_mode("blend", blend, BLEND_MODES)
    if mode == "legacy":
        # start + (start - end) * ((offset - start) / (start - end)) == offset
        return offset
    width = end.offset - start.offset
    if width == 0:
        return 0.0
    return (offset - start.offset) / width


def _mix(start: int, end: int, p: float) -> int:
    return int(round(start + p * (end - start)))


def interpolate_color(
    stops: Sequence[GradientStop],
    min_weight: float,
    max_weight: float,
    weight: float,
    *,
    blend: str = "segment",
    normalization: str = "max",
) -> RGBA:
    """Return the gradient color for ``weight``.

    Parameters
    ----------
    stops : sequence of GradientStop
        Stops ordered by ascending offset, covering ``[0, 1]``.
    min_weight, max_weight : float
        Weight range of the active weight scale.
    weight : float
        Weight of the point.
    blend : {"segment", "legacy"}, default="segment"
        Blend factor rule, see :func:`blend_factor`.
    normalization : {"max", "range"}, default="max"
        Offset rule, see :func:`normalize_weight`.

    Returns
    -------
    RGBA
        Channel-wise rounded linear blend of the two bracketing stops.

    Raises
    ------
    ConfigurationError
        If fewer than two stops are given, or no consecutive pair of stops
        brackets the normalized offset.
    """
    stops = tuple(stops)
    if len(stops) < 2:
        raise ConfigurationError("gradient must have at least 2 stops")

    offset = normalize_weight(min_weight, max_weight, weight, normalization)

    for start, end in zip(stops, stops[1:]):
        if start.offset <= offset <= end.offset:
            p = blend_factor(offset, start, end, blend)
            a, b = start.color, end.color
            return RGBA(
                r=_mix(a.r, b.r, p),
                g=_mix(a.g, b.g, p),
                b=_mix(a.b, b.b, p),
                a=_mix(a.a, b.a, p),
            )

    raise ConfigurationError("gradient must cover offsets 0..1")


def ensure_gradient(current: Optional[Gradient], theme_color: RGBA, default_opacity: float) -> Gradient:
    """Return ``current`` or a two-stop gradient derived from ``theme_color``.

    A configured gradient is never replaced. The fallback fades from the theme
    color at ``default_opacity`` (offset 0) to the opaque theme color
    (offset 1), which satisfies the interpolator's coverage requirement.
    """
    if current is not None:
        return current
    return (
        GradientStop(offset=0.0, color=theme_color.with_opacity(default_opacity)),
        GradientStop(offset=1.0, color=theme_color),
    )


__all__ = ["blend_factor", "ensure_gradient", "interpolate_color", "normalize_weight"]
