import math
from typing import Optional

from ..parsing.quantity_format import format_quantity
from ..parsing.quantity_parser import parse_quantity


def scale(raw: Optional[str], multiplier: float) -> Optional[str]:
    """
    Multiply a quantity by a servings/container multiplier.
    Qualitative text ("al gusto") comes back unchanged.
    """
    parsed = parse_quantity(raw)
    if parsed.amount is None:
        return raw
    value = parsed.amount * multiplier
    if not math.isfinite(value):
        return raw
    return format_quantity(round(value, 2), parsed.unit)


def step_quantity(raw: Optional[str], delta: float) -> Optional[str]:
    """
    +/- stepper for a shopping item quantity.
    Empty input counts as "1"; the result never goes below 1.
    """
    text = raw if raw and raw.strip() else "1"
    parsed = parse_quantity(text)
    if parsed.amount is None:
        return raw

    target = max(1, parsed.amount + delta)
    if parsed.amount == 0:
        return format_quantity(target, parsed.unit)
    return scale(text, target / parsed.amount)
