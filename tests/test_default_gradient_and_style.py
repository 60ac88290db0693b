from __future__ import annotations

import pytest

from heatchart import SERIES_STYLE_OPTIONS, GradientStop, HeatSeries, RGBA, ensure_gradient, interpolate_color, resolve_style_aliases
from heatchart.chart_style import DEFAULT_FILL_OPACITY, validate_mode

THEME = RGBA(99, 110, 250)


def test_configured_gradient_is_returned_unchanged() -> None:
    current = (GradientStop(0.0, RGBA(0, 0, 0)), GradientStop(1.0, RGBA(9, 9, 9)))

    assert ensure_gradient(current, THEME, 0.2) is current


def test_fallback_gradient_fades_the_theme_color_in() -> None:
    stops = ensure_gradient(None, THEME, 0.2)

    assert stops == (
        GradientStop(0.0, RGBA(99, 110, 250, 51)),
        GradientStop(1.0, THEME),
    )
    assert interpolate_color(stops, 0, 10, 0) == RGBA(99, 110, 250, 51)
    assert interpolate_color(stops, 0, 10, 10) == THEME


def test_series_defaults() -> None:
    series = HeatSeries()

    assert series.gradient is None
    assert series.fill_opacity == DEFAULT_FILL_OPACITY == 0.2
    assert series.scales_at == (0, 0, 0)
    assert series.blend == "segment"
    assert series.normalization == "max"
    assert series.default_point_width == (1.0, 1.0)
    assert series.point_margin == (0.0, 0.0)
    assert series.kind.value == "heat"


def test_opacity_aliases_resolve_to_fill_opacity() -> None:
    assert HeatSeries(opacity=0.5).fill_opacity == 0.5
    assert HeatSeries(alpha="1/4").fill_opacity == 0.25
    assert resolve_style_aliases(fill_opacity=0.3, opacity=0.3, alpha=None) == 0.3

    with pytest.raises(ValueError, match="different values"):
        HeatSeries(fill_opacity=0.3, alpha=0.4)


def test_series_configuration_is_validated() -> None:
    with pytest.raises(ValueError, match="within \\[0, 1\\]"):
        HeatSeries(fill_opacity=2)
    with pytest.raises(ValueError, match="3 entries"):
        HeatSeries(scales_at=(0, 0))
    with pytest.raises(ValueError, match="Unknown blend"):
        HeatSeries(blend="smooth")
    with pytest.raises(ValueError, match="Unknown normalization"):
        HeatSeries(normalization="log")


def test_validate_mode_is_case_insensitive() -> None:
    assert validate_mode("blend", "Legacy", ("segment", "legacy")) == "legacy"


def test_style_options_document_every_keyword() -> None:
    assert set(SERIES_STYLE_OPTIONS) == {"gradient", "fill_opacity", "opacity", "alpha", "blend", "normalization"}
