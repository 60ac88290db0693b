"""Exception types raised by heat-series rendering."""

from __future__ import annotations

GRADIENT_ERROR_CODE = 220


class ConfigurationError(ValueError):
    """A series configuration cannot be rendered.

    Raised synchronously from a render pass and never recovered locally; the
    configuration has to be corrected before the next pass can succeed.

    Parameters
    ----------
    message : str
        Human-readable description of the problem.
    code : int, optional
        Stable numeric error code. Gradient problems use ``220``.
    """

    def __init__(self, message: str, code: int = GRADIENT_ERROR_CODE) -> None:
        super().__init__(message)
        self.code = code


__all__ = ["ConfigurationError", "GRADIENT_ERROR_CODE"]
