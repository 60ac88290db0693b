"""Cartesian axis model and linear data-to-pixel scaling.

An ``Axis`` belongs to one data dimension (``0`` for x, ``1`` for y). Its
actual range is either fixed by the user (``min_value``/``max_value``) or
taken from the data on each render pass. Scaling needs the *screen*
direction, which the chart derives from the dimension and its ``invert_xy``
flag: horizontal pixels grow to the right, vertical pixels grow downwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Union

import numpy as np

from .InputConvert import InputConvert

ArrayLike = Union[float, np.ndarray]

HORIZONTAL = 0
VERTICAL = 1


class Scalable(Protocol):
    """Anything that exposes an actual range for a plotted dimension."""

    actual_min_value: float
    actual_max_value: float


@dataclass
class Axis:
    """One Cartesian axis.

    Parameters
    ----------
    dimension : int
        Data dimension addressed by this axis: ``0`` (x) or ``1`` (y).
    min_value, max_value : float or None
        Fixed limits; ``None`` means "fit to data".
    reverse : bool
        Flip the pixel direction of the axis.
    title : str
        Optional axis title metadata.
    """

    dimension: int
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    reverse: bool = False
    title: str = ""
    actual_min_value: float = field(default=0.0, init=False)
    actual_max_value: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.dimension not in (0, 1):
            raise ValueError(f"Axis dimension must be 0 or 1, got {self.dimension!r}")
        if self.min_value is not None:
            self.min_value = InputConvert(self.min_value, float)
        if self.max_value is not None:
            self.max_value = InputConvert(self.max_value, float)
        self.actual_min_value = self.min_value if self.min_value is not None else 0.0
        self.actual_max_value = self.max_value if self.max_value is not None else 0.0

    def fit(self, data_min: Optional[float], data_max: Optional[float]) -> None:
        """Resolve the actual range from fixed limits and the data bounds."""
        lo = data_min if data_min is not None else 0.0
        hi = data_max if data_max is not None else 0.0
        self.actual_min_value = self.min_value if self.min_value is not None else float(lo)
        self.actual_max_value = self.max_value if self.max_value is not None else float(hi)

    def scale_to_ui(self, value: ArrayLike, length: float, direction: int) -> ArrayLike:
        """Map data ``value`` to a pixel position along ``length`` pixels.

        Parameters
        ----------
        value : float or numpy.ndarray
            Data value(s) on this axis.
        length : float
            Pixel length of the draw area along ``direction``.
        direction : int
            ``HORIZONTAL`` (left to right) or ``VERTICAL`` (top to bottom,
            so larger data values sit higher on screen).

        Returns
        -------
        float or numpy.ndarray
            Pixel position(s). A zero-width range maps to the center.
        """
        lo, hi = self.actual_min_value, self.actual_max_value
        values = np.asarray(value, dtype=float)
        if hi == lo:
            pixels = np.full_like(values, length / 2.0)
        else:
            fraction = (values - lo) / (hi - lo)
            if direction == VERTICAL:
                fraction = 1.0 - fraction
            if self.reverse:
                fraction = 1.0 - fraction
            pixels = fraction * length
        if pixels.ndim == 0:
            return float(pixels)
        return pixels

    def unit_width(self, units: float, length: float, direction: int) -> float:
        """Return the pixel length of ``units`` data units on this axis."""
        origin = self.scale_to_ui(0.0, length, direction)
        end = self.scale_to_ui(units, length, direction)
        return abs(float(end) - float(origin))


__all__ = ["Axis", "HORIZONTAL", "Scalable", "VERTICAL"]
