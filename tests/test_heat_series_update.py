from __future__ import annotations

import dataclasses
import math

import pytest

from heatchart import (
    Axis,
    CartesianChart,
    ConfigurationError,
    HeatSeries,
    RGBA,
    Rectangle,
    TRANSPARENT,
    UpdateContext,
    WeightedCoordinate,
)

GRADIENT = [(0, "#000000"), (1, "#ff0000")]


class _RecordingView:
    def __init__(self, log: list) -> None:
        self.calls: list = []
        self._log = log

    def draw_shape(self, current, previous) -> None:
        self.calls.append((current.view_model, previous))
        self._log.append((current.key, None if previous is None else previous.key))


class _RecordingProvider:
    def __init__(self) -> None:
        self.views: list[_RecordingView] = []
        self.log: list = []

    def create_view(self) -> _RecordingView:
        view = _RecordingView(self.log)
        self.views.append(view)
        return view


def _chart(provider: _RecordingProvider, **kwargs) -> CartesianChart:
    return CartesianChart(draw_area_size=(200, 100), view_provider=provider, **kwargs)


def test_first_render_creates_views_and_fades_in_from_transparent() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(0, 0, 5), (10, 10, 10)], gradient=GRADIENT))

    chart.render()

    assert len(provider.views) == 2
    for point, view in zip(series.points, provider.views):
        assert point.view is view
        assert point.view_model.from_color == TRANSPARENT
    assert [p.view_model.to_color for p in series.points] == [RGBA(128, 0, 0), RGBA(255, 0, 0)]


def test_second_render_chains_from_previous_target_colors() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(0, 0, 5), (10, 10, 10)], gradient=GRADIENT))

    chart.render()
    first = [p.view_model.to_color for p in series.points]
    views = [p.view for p in series.points]

    series.values = [(0, 0, 10), (10, 10, 2)]
    chart.render()

    assert [p.view_model.from_color for p in series.points] == first
    assert [p.view for p in series.points] == views
    assert len(provider.views) == 2
    assert series.points[0].view_model.to_color == RGBA(255, 0, 0)


def test_draw_receives_current_and_previous_point_in_series_order() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    chart.add_series(HeatSeries([(0, 0, 1), (5, 5, 2), (10, 10, 3)], gradient=GRADIENT))

    chart.render()

    assert provider.log == [(0, None), (1, 0), (2, 1)]


def test_rectangle_and_interaction_area_match_cell_geometry() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(0, 0, 5), (10, 10, 10)], gradient=GRADIENT))

    chart.render()

    first = series.points[0]
    expected = Rectangle(0.0, 90.0, 200 / 11, 100 / 11)
    rect = first.view_model.rectangle
    assert (rect.x, rect.y, rect.width, rect.height) == pytest.approx(
        (expected.x, expected.y, expected.width, expected.height)
    )
    assert first.interaction_area.rectangle == rect


def test_inverted_render_swaps_cell_dimensions() -> None:
    provider = _RecordingProvider()
    values = [(0, 0, 1), (9, 4, 2)]

    plain = _chart(provider)
    plain_series = plain.add_series(HeatSeries(values, gradient=GRADIENT))
    plain.render()

    inverted = _chart(provider, invert_xy=True)
    inverted_series = inverted.add_series(HeatSeries(values, gradient=GRADIENT))
    inverted.render()

    a = plain_series.points[0].view_model.rectangle
    b = inverted_series.points[0].view_model.rectangle
    assert (a.width, a.height) == pytest.approx((20.0, 20.0))
    assert (b.width, b.height) == pytest.approx((40.0, 10.0))


def test_degenerate_data_range_renders_finite_cells() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(3, 3, 1)], gradient=GRADIENT))

    chart.render()

    rect = series.points[0].view_model.rectangle
    assert 0 < rect.width < 1e-300
    assert 0 < rect.height < 1e-300


def test_missing_gradient_is_seeded_from_the_palette() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider, palette=["#336699"])
    series = chart.add_series(HeatSeries([(0, 0, 0), (1, 1, 4)]))

    chart.render()

    assert [stop.offset for stop in series.gradient] == [0.0, 1.0]
    assert series.gradient[0].color == RGBA(0x33, 0x66, 0x99, 51)
    assert series.gradient[1].color == RGBA(0x33, 0x66, 0x99, 255)
    assert series.points[0].view_model.to_color == RGBA(0x33, 0x66, 0x99, 51)


def test_uncovered_gradient_fails_the_render_pass() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    chart.add_series(HeatSeries([(0, 0, 1), (1, 1, 10)], gradient=[(0.2, "#000000"), (0.8, "#ffffff")]))

    with pytest.raises(ConfigurationError, match="cover offsets"):
        chart.render()

    assert chart.is_stale


def test_series_view_provider_overrides_the_chart_provider() -> None:
    chart_provider = _RecordingProvider()
    own_provider = _RecordingProvider()
    chart = _chart(chart_provider)
    chart.add_series(HeatSeries([(0, 0, 1)], gradient=GRADIENT, view_provider=own_provider))

    chart.render()

    assert len(own_provider.views) == 1
    assert chart_provider.views == []


def test_weight_range_is_per_weight_scale() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    low = chart.add_series(HeatSeries([(0, 0, 1), (1, 1, 2)], gradient=GRADIENT, scales_at=(0, 0, 0)), id="low")
    high = chart.add_series(HeatSeries([(0, 1, 100)], gradient=GRADIENT, scales_at=(0, 0, 1)), id="high")

    chart.render()

    assert low.points[1].view_model.to_color == RGBA(255, 0, 0)
    assert high.points[0].view_model.to_color == RGBA(255, 0, 0)


def test_mapper_builds_coordinates_from_custom_models() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    rows = [{"day": 0, "hour": 3, "load": 2.0}, {"day": 1, "hour": 4, "load": 4.0}]
    series = chart.add_series(
        HeatSeries(rows, gradient=GRADIENT, mapper=lambda row, _i: WeightedCoordinate(row["day"], row["hour"], row["load"]))
    )

    chart.render()

    assert series.points[1].model is rows[1]
    assert series.points[1].coordinate == WeightedCoordinate(1, 4, 4.0)


def test_shrinking_values_drops_trailing_points() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(0, 0, 1), (1, 1, 2), (2, 2, 3)], gradient=GRADIENT))
    chart.render()
    kept = series.points[0]

    series.values = [(5, 5, 1)]

    assert series.points == (kept,)
    assert kept.coordinate == WeightedCoordinate(5, 5, 1)


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(TypeError, match="must be"):
        HeatSeries(["not a point"])

    with pytest.raises(ValueError, match="missing 'weight'"):
        HeatSeries([{"x": 1, "y": 2}])


def test_fixed_axis_limits_survive_render() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider, x_axes=[Axis(dimension=0, min_value=-10, max_value=10)])
    chart.add_series(HeatSeries([(0, 0, 1), (1, 5, 2)], gradient=GRADIENT))

    chart.render()

    assert (chart.x_axis.actual_min_value, chart.x_axis.actual_max_value) == (-10.0, 10.0)
    assert (chart.y_axis.actual_min_value, chart.y_axis.actual_max_value) == (0.0, 5.0)


def test_regrowing_values_reuses_views_of_dropped_points() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(0, 0, 1), (1, 1, 2), (2, 2, 3)], gradient=GRADIENT))
    chart.render()
    dropped_views = [p.view for p in series.points[1:]]

    series.values = [(0, 0, 1)]
    chart.render()
    series.values = [(0, 0, 1), (1, 1, 2), (2, 2, 3)]
    chart.render()

    assert len(provider.views) == 3
    assert [p.view for p in series.points[1:]] == dropped_views
    assert series.points[1].view_model.from_color == TRANSPARENT


def test_default_mapper_parses_expression_strings() -> None:
    series = HeatSeries([("1/2", "pi", "2")])

    coordinate = series.points[0].coordinate
    assert coordinate.x == 0.5
    assert coordinate.y == pytest.approx(math.pi)
    assert coordinate.weight == 2.0


def test_update_context_carries_only_ranges_and_provider() -> None:
    provider = _RecordingProvider()
    chart = _chart(provider)
    series = chart.add_series(HeatSeries([(0, 0, 1)], gradient=GRADIENT))
    contexts: list[UpdateContext] = []
    original = series.update_view

    def _spy(owner, context):
        contexts.append(context)
        original(owner, context)

    series.update_view = _spy  # type: ignore[method-assign]
    series.gradient = [(0, "#000000"), (1, "#ffffff")]
    chart.render()

    assert [f.name for f in dataclasses.fields(contexts[0])] == ["ranges", "view_provider"]
    assert contexts[0].view_provider is provider
    assert contexts[0].range_for(2, 0) == (1.0, 1.0)
