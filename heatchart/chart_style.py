"""Series style defaults and option contracts.

This module centralizes the discoverable style keyword metadata, module-level
defaults and alias resolution rules used by :class:`~heatchart.series_heat.HeatSeries`
and :class:`~heatchart.CartesianChart.CartesianChart`. Keeping these
contracts in one place gives tests a single location to lock style semantics.
"""

from __future__ import annotations

from plotly.colors import qualitative

DEFAULT_FILL_OPACITY: float = 0.2
DEFAULT_POINT_WIDTH: tuple[float, float] = (1.0, 1.0)
DEFAULT_POINT_MARGIN: tuple[float, float] = (0.0, 0.0)
DEFAULT_SCALES_AT: tuple[int, int, int] = (0, 0, 0)
DEFAULT_DRAW_AREA: tuple[float, float] = (600.0, 400.0)
DEFAULT_PALETTE: tuple[str, ...] = tuple(qualitative.Plotly)

BLEND_MODES: tuple[str, ...] = ("segment", "legacy")
NORMALIZATION_MODES: tuple[str, ...] = ("max", "range")

SERIES_STYLE_OPTIONS: dict[str, str] = {
    "gradient": "Ordered (offset, color) stops spanning offsets 0..1. Colors accept hex (#RRGGBB[AA]) or rgb()/rgba() strings.",
    "fill_opacity": "Alpha (0.0-1.0) of the offset-0 stop when the gradient is derived from the theme color.",
    "opacity": "Alias for fill_opacity.",
    "alpha": "Alias for fill_opacity.",
    "blend": "Blend factor inside a stop segment: 'segment' (local to the two stops) or 'legacy' (global offset).",
    "normalization": "Weight to offset mapping: 'max' (weight / max) or 'range' ((weight - min) / (max - min)).",
}


def resolve_style_aliases(
    *,
    fill_opacity: int | float | None,
    opacity: int | float | None,
    alpha: int | float | None,
) -> int | float | None:
    """Resolve ``opacity``/``alpha`` aliases into one ``fill_opacity`` value.

    Raises
    ------
    ValueError
        If aliases are provided with conflicting values.
    """
    for name, value in (("opacity", opacity), ("alpha", alpha)):
        if value is None:
            continue
        if fill_opacity is not None and value != fill_opacity:
            raise ValueError(
                f"HeatSeries received both fill_opacity= and {name}= with different values; use only one."
            )
        fill_opacity = value
    return fill_opacity


def validate_mode(name: str, value: str, allowed: tuple[str, ...]) -> str:
    """Return ``value`` lower-cased if it is one of ``allowed``."""
    mode = str(value).lower()
    if mode not in allowed:
        raise ValueError(f"Unknown {name} {value!r}; expected one of {', '.join(allowed)}")
    return mode


__all__ = [
    "BLEND_MODES",
    "DEFAULT_DRAW_AREA",
    "DEFAULT_FILL_OPACITY",
    "DEFAULT_PALETTE",
    "DEFAULT_POINT_MARGIN",
    "DEFAULT_POINT_WIDTH",
    "DEFAULT_SCALES_AT",
    "NORMALIZATION_MODES",
    "SERIES_STYLE_OPTIONS",
    "resolve_style_aliases",
    "validate_mode",
]
