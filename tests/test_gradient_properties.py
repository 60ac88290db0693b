"""Property-based checks for gradient interpolation.

These tests exercise the channel blend over arbitrary endpoint colors and
weights to increase confidence beyond example-based unit tests.
"""

from __future__ import annotations

import pytest

from heatchart import GradientStop, RGBA, interpolate_color

try:
    from hypothesis import given
    from hypothesis import strategies as st
except ModuleNotFoundError:  # pragma: no cover - environment-specific fallback
    pytest.skip("hypothesis is required for property-based tests", allow_module_level=True)


CHANNELS = st.integers(min_value=0, max_value=255)
WEIGHTS = st.floats(min_value=0.0, max_value=1000.0, allow_nan=False, allow_infinity=False)


@st.composite
def increasing_pairs(draw):
    lo = draw(CHANNELS)
    hi = draw(st.integers(min_value=lo, max_value=255))
    return lo, hi


@given(
    r=increasing_pairs(),
    g=increasing_pairs(),
    b=increasing_pairs(),
    a=increasing_pairs(),
    max_weight=st.floats(min_value=1e-3, max_value=1000.0, allow_nan=False),
    fraction=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
    blend=st.sampled_from(["segment", "legacy"]),
)
def test_blended_channels_stay_between_endpoints(r, g, b, a, max_weight, fraction, blend) -> None:
    """Intermediate weights never leave the endpoint channel interval."""
    start = RGBA(r[0], g[0], b[0], a[0])
    end = RGBA(r[1], g[1], b[1], a[1])
    stops = (GradientStop(0.0, start), GradientStop(1.0, end))
    weight = min(fraction * max_weight, max_weight)

    color = interpolate_color(stops, 0.0, max_weight, weight, blend=blend)

    for channel, (lo, hi) in zip(color.as_tuple(), (r, g, b, a)):
        assert lo <= channel <= hi


@given(weights=st.lists(WEIGHTS, min_size=2, max_size=20))
def test_colors_are_monotonic_in_weight(weights) -> None:
    """Sorting points by weight sorts their red channel on a black-to-red ramp."""
    stops = (GradientStop(0.0, RGBA(0, 0, 0)), GradientStop(1.0, RGBA(255, 0, 0)))
    max_weight = max(weights)
    if max_weight == 0:
        return

    reds = [interpolate_color(stops, 0.0, max_weight, w).r for w in sorted(weights)]

    assert reds == sorted(reds)
