"""Annotated field types shared by the calculator schemas.

Form inputs arrive as whatever the browser sends. Absent, unparseable,
non-finite or negative values are treated as zero instead of being
rejected, so the calculators always have something to work with.
"""

import math
from typing import Annotated, Any

from pydantic import BeforeValidator


def to_amount(value: Any) -> float:
    """Coerce a raw input value to a non-negative float."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def to_whole_years(value: Any) -> int:
    return int(to_amount(value))


Amount = Annotated[float, BeforeValidator(to_amount)]
WholeYears = Annotated[int, BeforeValidator(to_whole_years)]
