# === SECTION: InputConvert [id: InputConvert]===
from __future__ import annotations

from typing import Any, Type, TypeVar
import sympy as sp

T = TypeVar("T", int, float)


def InputConvert(obj: Any, dest_type: Type[T] = float, truncate: bool = True) -> T:
    """
    Convert a user-supplied scalar (offset, axis limit, size) to `dest_type`.

    Supported destination types:
    - float
    - int

    Rules:
    - If `obj` is a real number: cast via dest_type(obj).
    - If `obj` is a string:
        1) try float(s)
        2) else parse as a SymPy expression ("1/3", "pi/4") and evaluate.

    Truncation Rules (`truncate`):
    - When converting Float -> Int:
        - If `truncate=True`: Truncate decimal part (e.g., 3.9 -> 3).
        - If `truncate=False`: Require exact integer (e.g., 3.0 -> 3, 3.1 -> Error).

    Raises
    ------
    NotImplementedError
        If dest_type is unsupported.
    ValueError
        If conversion fails, the value is not real, or truncation rules are violated.
    """
    if dest_type not in (float, int):
        raise NotImplementedError(
            f"Unsupported destination type: {dest_type!r}. Only float and int are supported."
        )

    def _coerce_real(x: float) -> T:
        if dest_type is float:
            return float(x)  # type: ignore[return-value]

        if not float(x).is_integer():
            if not truncate:
                raise ValueError(
                    f"Could not convert {obj!r} to int: value is not an exact integer."
                )
        return int(x)  # type: ignore[return-value]

    # bool is an int subclass but never a meaningful chart value
    if isinstance(obj, bool):
        raise ValueError(f"Could not convert {obj!r} to {dest_type.__name__}.")

    if isinstance(obj, (int, float)):
        return _coerce_real(float(obj))

    if isinstance(obj, str):
        s = obj.strip()
        if s == "":
            raise ValueError(f"Cannot convert empty string to {dest_type.__name__}.")

        try:
            return _coerce_real(float(s))
        except ValueError:
            pass

        try:
            expr = sp.sympify(s)
            value = complex(expr.evalf())
        except Exception as e:
            raise ValueError(
                f"Could not convert {obj!r} to {dest_type.__name__} (neither directly nor via SymPy)."
            ) from e
        if value.imag != 0:
            raise ValueError(f"Could not convert {obj!r} to {dest_type.__name__}: value is not real.")
        return _coerce_real(value.real)

    # numpy scalars and other objects implementing __float__
    try:
        return _coerce_real(float(obj))
    except Exception as e:
        raise ValueError(f"Could not convert {obj!r} to {dest_type.__name__}.") from e

# === END OF SECTION: InputConvert [id: InputConvert]===
