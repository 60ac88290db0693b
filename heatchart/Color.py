"""Integer RGBA color values used by gradients and view-models.

Channels are stored as integers in ``0..255``. Parsing accepts the same color
notations the drawing backend (Plotly) understands for fills: hex strings
(``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``) and ``rgb(...)``/``rgba(...)`` strings
whose alpha is given as a fraction in ``[0, 1]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from collections.abc import Sequence
from typing import Any, Union

ColorLike = Union["RGBA", str, Sequence[int]]

_RGB_FUNC_RE = re.compile(
    r"^rgba?\(\s*([^,\s]+)\s*,\s*([^,\s]+)\s*,\s*([^,\s]+)\s*(?:,\s*([^,\s]+)\s*)?\)$",
    re.IGNORECASE,
)


def _channel(value: Any) -> int:
    """Return ``value`` as an integer channel, validating the 0..255 range."""
    if isinstance(value, bool):
        raise TypeError("Color channels must be numbers, not bool")
    channel = int(round(float(value)))
    if not 0 <= channel <= 255:
        raise ValueError(f"Color channel out of range 0..255: {value!r}")
    return channel


@dataclass(frozen=True)
class RGBA:
    """Immutable color with integer red, green, blue and alpha channels.

    Parameters
    ----------
    r, g, b : int
        Color channels in ``0..255``.
    a : int, default=255
        Alpha channel in ``0..255``; ``0`` is fully transparent.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _channel(getattr(self, name)))

    def with_opacity(self, opacity: float) -> "RGBA":
        """Return the same color with alpha set to ``opacity`` (``0.0``–``1.0``)."""
        opacity = float(opacity)
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"opacity must be within [0, 1], got {opacity!r}")
        return RGBA(self.r, self.g, self.b, round(opacity * 255))

    def to_css(self) -> str:
        """Return a CSS ``rgba()`` string as accepted by Plotly fill colors."""
        alpha = round(self.a / 255, 4)
        return f"rgba({self.r},{self.g},{self.b},{alpha:g})"

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


TRANSPARENT = RGBA(0, 0, 0, 0)


def _parse_hex(text: str) -> RGBA:
    digits = text[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ValueError(f"Invalid hex color: {text!r}")
    try:
        values = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {text!r}") from e
    return RGBA(*values)


def parse_color(value: ColorLike) -> RGBA:
    """Coerce ``value`` into an :class:`RGBA`.

    Parameters
    ----------
    value : RGBA, str, or sequence of int
        An existing color, a hex or ``rgb()``/``rgba()`` string, or a
        ``(r, g, b)``/``(r, g, b, a)`` sequence of integer channels.

    Returns
    -------
    RGBA

    Raises
    ------
    ValueError
        If the string cannot be parsed or a channel is out of range.
    TypeError
        If ``value`` has an unsupported type.

    Examples
    --------
    >>> parse_color("#ff000080")
    RGBA(r=255, g=0, b=0, a=128)
    >>> parse_color("rgba(0, 128, 0, 0.5)")
    RGBA(r=0, g=128, b=0, a=128)
    """
    if isinstance(value, RGBA):
        return value

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#"):
            return _parse_hex(text)
        match = _RGB_FUNC_RE.match(text)
        if match is None:
            raise ValueError(f"Unsupported color string: {value!r}")
        r, g, b, alpha = match.groups()
        if alpha is None:
            return RGBA(float(r), float(g), float(b))
        fraction = float(alpha)
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"Alpha must be within [0, 1] in {value!r}")
        return RGBA(float(r), float(g), float(b), round(fraction * 255))

    if isinstance(value, Sequence) and len(value) in (3, 4):
        return RGBA(*value)

    raise TypeError(f"Cannot interpret {type(value).__name__} as a color")


__all__ = ["ColorLike", "RGBA", "TRANSPARENT", "parse_color"]
