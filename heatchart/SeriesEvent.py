"""Standardized series configuration-change event payloads.

This module defines ``SeriesEvent``, the immutable structure a series emits
when one of its configuration values is replaced, and which the owning
chart forwards to its change hooks and to the next ``UpdateContext``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .series_heat import HeatSeries


@dataclass(frozen=True)
class SeriesEvent:
    """Normalized configuration change emitted by a series.

    Parameters
    ----------
    series : HeatSeries
        The series whose configuration changed.
    name : str
        Name of the replaced configuration value (for example ``"gradient"``).
    old : Any
        The previous value.
    new : Any
        The value now in effect.

    Notes
    -----
    Configuration values are replaced, never mutated, so ``old`` and ``new``
    can be compared safely after the fact.

    Examples
    --------
    >>> from heatchart import HeatSeries, SeriesEvent  # doctest: +SKIP
    >>> SeriesEvent(series=HeatSeries(), name="gradient", old=None, new=())  # doctest: +SKIP
    """
    series: "HeatSeries"
    name: str
    old: Any
    new: Any
