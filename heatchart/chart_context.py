"""Per-render-pass context shared by all series of a chart.

An ``UpdateContext`` is built once per :meth:`CartesianChart.render` call and
carries the data ranges per dimension and scale index together with the view
provider the series should draw with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

import numpy as np

if TYPE_CHECKING:
    from .chart_view import ViewProvider
    from .series_heat import HeatSeries

DIMENSIONS = 3

Range = Tuple[float, float]


@dataclass
class UpdateContext:
    """State handed to every series during one render pass.

    Parameters
    ----------
    ranges : list[dict[int, tuple[float, float]]]
        ``ranges[dimension][scale_index] == (min, max)`` over every series
        scaled at that index. Dimension ``2`` holds weights.
    view_provider : ViewProvider
        Factory for point drawables, injected by the chart.
    """

    ranges: List[Dict[int, Range]]
    view_provider: "ViewProvider"

    def range_for(self, dimension: int, scale_index: int) -> Optional[Range]:
        """Return the ``(min, max)`` range or ``None`` when no data is scaled there."""
        return self.ranges[dimension].get(scale_index)


def collect_ranges(series: Iterable["HeatSeries"]) -> List[Dict[int, Range]]:
    """Return data ranges per dimension and scale index for ``series``."""
    ranges: List[Dict[int, Range]] = [{} for _ in range(DIMENSIONS)]
    for item in series:
        values = item.coordinate_array()
        if values.size == 0:
            continue
        lows = values.min(axis=0)
        highs = values.max(axis=0)
        for dimension in range(DIMENSIONS):
            scale = item.scales_at[dimension]
            lo, hi = float(lows[dimension]), float(highs[dimension])
            known = ranges[dimension].get(scale)
            if known is not None:
                lo, hi = min(lo, known[0]), max(hi, known[1])
            ranges[dimension][scale] = (lo, hi)
    return ranges


def empty_coordinates() -> np.ndarray:
    return np.empty((0, DIMENSIONS), dtype=float)


__all__ = ["DIMENSIONS", "Range", "UpdateContext", "collect_ranges", "empty_coordinates"]
