from __future__ import annotations

import math
from types import SimpleNamespace

import pytest

from heatchart import Axis, AxisIndexMap, CellSize, axis_deltas, axis_index_map, build_cell_size
from heatchart.chart_geometry import MAX_FLOAT


def _range(lo: float, hi: float) -> SimpleNamespace:
    return SimpleNamespace(actual_min_value=lo, actual_max_value=hi)


def test_axis_index_map_swaps_under_inversion() -> None:
    assert axis_index_map(False) == AxisIndexMap(xi=0, yi=1)
    assert axis_index_map(True) == AxisIndexMap(xi=1, yi=0)


def test_cell_size_divides_draw_area_by_span_plus_one() -> None:
    size = build_cell_size(_range(0, 9), _range(0, 4), (600, 400))

    assert size == CellSize(width=pytest.approx(60.0), height=pytest.approx(80.0))


def test_zero_span_yields_finite_positive_cells() -> None:
    size = build_cell_size(_range(5, 5), _range(-2, -2), (600, 400))

    for value in size:
        assert math.isfinite(value)
        assert value > 0
        assert value < 1e-300


def test_zero_span_substitution_is_exact_equality_only() -> None:
    assert axis_deltas(_range(1.0, 1.0 + 1e-12), _range(3, 3)) == (pytest.approx(1e-12, rel=1e-3), MAX_FLOAT)


def test_inverted_cell_matches_non_inverted_with_axes_swapped() -> None:
    x, y = _range(0, 9), _range(0, 4)

    inverted = build_cell_size(x, y, (600, 400), invert_xy=True)
    swapped = build_cell_size(y, x, (600, 400), invert_xy=False)

    assert inverted == swapped
    assert inverted == CellSize(width=pytest.approx(120.0), height=pytest.approx(40.0))


def test_cell_size_accepts_fixed_axis_limits() -> None:
    x = Axis(dimension=0, min_value="-1", max_value="pi")
    y = Axis(dimension=1, min_value=0, max_value=1)

    size = build_cell_size(x, y, (300, 200))

    assert size.width == pytest.approx(300 / (math.pi + 2))
    assert size.height == pytest.approx(100.0)
