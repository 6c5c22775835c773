import math
from numbers import Real
from typing import Any

from trade_charges.core.errors import InvalidInputError


def round_half_up(value: float) -> int:
    # Halves go towards +inf, so -2.5 -> -2 and 2.5 -> 3.
    return int(math.floor(value + 0.5))


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def require_positive(field: str, value: Any) -> float:
    """Return value as a float, or raise InvalidInputError unless it is a finite number > 0."""
    if not is_finite_number(value) or value <= 0:
        raise InvalidInputError(field, value, f"{field} must be a finite number > 0, got {value!r}")
    return float(value)
