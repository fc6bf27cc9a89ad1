"""
Unit Conversion Service.

Handles same-category (exact) conversions and volume <-> weight
conversions through ingredient densities (approximate).
"""

import logging
from typing import Literal, Optional

from ..parsing.quantity_format import format_amount
from ..parsing.quantity_parser import parse_quantity
from .densities import WATER_DENSITY, find_density
from .units import classify

logger = logging.getLogger("recetario.units")

DensitySource = Literal["table", "fallback"]

# --- Types ---

class ConversionResult:
    def __init__(
        self,
        success: bool,
        amount: Optional[str] = None,
        unit: Optional[str] = None,
        approximate: bool = False,
        value: Optional[float] = None,
        density_g_per_ml: Optional[float] = None,
        density_source: Optional[DensitySource] = None,
    ):
        self.success = success
        self.amount = amount
        self.unit = unit
        self.approximate = approximate
        # Unrounded result, for callers that keep computing (combiner)
        self.value = value
        self.density_g_per_ml = density_g_per_ml
        self.density_source = density_source

    @classmethod
    def failed(cls, unit: Optional[str] = None) -> "ConversionResult":
        return cls(False, None, unit, False)

    def to_dict(self):
        return {
            "success": self.success,
            "amount": self.amount,
            "unit": self.unit,
            "approximate": self.approximate,
            "density_g_per_ml": self.density_g_per_ml,
            "density_source": self.density_source,
        }


# --- Core Functions ---

def convert(
    amount: float,
    from_unit: str,
    to_unit: str,
    ingredient_name: Optional[str] = None,
    allow_default_density: bool = True,
    default_density: float = WATER_DENSITY,
) -> ConversionResult:
    """
    Convert `amount` from one unit to another.

    Same category: amount * factor(from) / factor(to), exact.
    Volume <-> weight: goes through ml and g with the ingredient density
    and is always approximate. Without a density match the water default
    is used, unless `allow_default_density` is off, in which case the
    conversion fails.
    """
    target = (to_unit or "").strip()
    type_from, factor_from = classify(from_unit)
    type_to, factor_to = classify(to_unit)

    if type_from == "unknown" or type_to == "unknown":
        return ConversionResult.failed(target or None)

    # Case 1: Same category
    if type_from == type_to:
        result_qty = amount * factor_from / factor_to
        return ConversionResult(
            True, format_amount(result_qty), target, approximate=False, value=result_qty
        )

    # Case 2: Cross category (volume <-> weight)
    entry = find_density(ingredient_name)
    if entry is not None:
        density = entry.grams_per_ml
        source = "table"
    elif allow_default_density:
        logger.debug(f"No density for '{ingredient_name or ''}', using {default_density} g/ml")
        density = default_density
        source = "fallback"
    else:
        return ConversionResult.failed(target)

    base_qty_from = amount * factor_from  # ml or g
    if type_from == "volume":  # ml -> g
        result_base_to = base_qty_from * density
    else:  # g -> ml
        result_base_to = base_qty_from / density

    result_qty = result_base_to / factor_to
    return ConversionResult(
        True,
        format_amount(result_qty),
        target,
        approximate=True,
        value=result_qty,
        density_g_per_ml=density,
        density_source=source,
    )


def convert_quantity(
    raw_amount: str,
    from_unit: str,
    to_unit: str,
    ingredient_name: Optional[str] = None,
    allow_default_density: bool = True,
    default_density: float = WATER_DENSITY,
) -> ConversionResult:
    """Like `convert`, for an amount still in free-text form ("1 1/2")."""
    parsed = parse_quantity(raw_amount)
    if parsed.amount is None:
        logger.debug(f"Cannot convert non-numeric amount '{raw_amount}'")
        return ConversionResult.failed((to_unit or "").strip() or None)
    return convert(
        parsed.amount,
        from_unit,
        to_unit,
        ingredient_name,
        allow_default_density=allow_default_density,
        default_density=default_density,
    )
