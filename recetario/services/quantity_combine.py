"""
Merge two quantity strings for the same ingredient into one.

Numeric quantities in compatible units are summed in the first
quantity's unit. Anything that cannot be reconciled is joined as
"<a> + <b>" so no information is lost.
"""

import logging

from ..parsing.quantity_format import format_quantity
from ..parsing.quantity_parser import parse_quantity
from .densities import find_density
from .unit_conversion import convert
from .units import canonical_unit, classify

logger = logging.getLogger("recetario.combine")

SEPARATOR = " + "


def _concat(a: str, b: str) -> str:
    return f"{a}{SEPARATOR}{b}"


def combine(a: str, b: str, ingredient_name: str = "") -> str:
    if a == b:
        return a

    # An earlier concatenation is never re-summed by its leading number
    if SEPARATOR in a or SEPARATOR in b:
        return _concat(a, b)

    qa = parse_quantity(a)
    qb = parse_quantity(b)
    if qa.amount is None or qb.amount is None:
        logger.debug(f"Non-numeric quantity for '{ingredient_name}', keeping both: {a!r}, {b!r}")
        return _concat(a, b)

    # Same unit (including same unknown unit, or both bare counts)
    if canonical_unit(qa.unit) == canonical_unit(qb.unit):
        return format_quantity(qa.amount + qb.amount, qa.unit)

    type_a, _ = classify(qa.unit)
    type_b, _ = classify(qb.unit)
    if type_a == "unknown" or type_b == "unknown":
        return _concat(a, b)

    # Cross category only with a real density; never the water default here
    if type_a != type_b and find_density(ingredient_name) is None:
        logger.debug(f"No density for '{ingredient_name}', keeping both: {a!r}, {b!r}")
        return _concat(a, b)

    result = convert(qb.amount, qb.unit, qa.unit, ingredient_name, allow_default_density=False)
    if not result.success or result.value is None:
        return _concat(a, b)

    return format_quantity(qa.amount + result.value, qa.unit)
