"""
Unit catalog and classification.

Units are grouped into volume (base: ml) and weight (base: g). Anything
that is not in the table (piezas, dientes, pizca, ...) is "unknown" and
passes through conversions untouched.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from ..core.text import fold_text

# --- Types ---

UnitCategory = Literal["volume", "weight", "unknown"]


@dataclass(frozen=True)
class UnitDefinition:
    canonical: str
    label: str
    category: UnitCategory
    factor_to_base: float
    aliases: Tuple[str, ...] = ()


# --- Data Tables ---

CUP_ML = 236.588

# Order matters for the catalog endpoint (dropdown order).
UNIT_TABLE: Tuple[UnitDefinition, ...] = (
    # Volume (base: ml)
    UnitDefinition("cup", "taza", "volume", CUP_ML,
                   ("cup", "cups", "taza", "tazas", "c")),
    UnitDefinition("tbsp", "cucharada", "volume", 14.787,
                   ("tbsp", "tablespoon", "tablespoons", "cucharada", "cucharadas", "cda", "cdas")),
    UnitDefinition("tsp", "cucharadita", "volume", 4.929,
                   ("tsp", "teaspoon", "teaspoons", "cucharadita", "cucharaditas", "cdta", "cdtas")),
    UnitDefinition("ml", "ml", "volume", 1.0,
                   ("ml", "milliliter", "milliliters", "mililitro", "mililitros")),
    UnitDefinition("l", "litro", "volume", 1000.0,
                   ("l", "liter", "liters", "litro", "litros")),
    UnitDefinition("fl oz", "onza líquida", "volume", 29.574,
                   ("fl oz", "fluid ounce", "fluid ounces", "onza líquida", "onzas líquidas")),
    # Weight (base: g)
    UnitDefinition("g", "g", "weight", 1.0,
                   ("g", "gr", "gram", "grams", "gramo", "gramos")),
    UnitDefinition("kg", "kg", "weight", 1000.0,
                   ("kg", "kilogram", "kilograms", "kilo", "kilos")),
    UnitDefinition("oz", "oz", "weight", 28.3495,
                   ("oz", "ounce", "ounces", "onza", "onzas")),
    UnitDefinition("lb", "lb", "weight", 453.592,
                   ("lb", "lbs", "pound", "pounds", "libra", "libras")),
)

DEFAULT_WEIGHT_UNIT = "g"
DEFAULT_VOLUME_UNIT = "cup"


def _build_alias_index():
    index = {}
    for unit in UNIT_TABLE:
        for alias in (unit.canonical,) + unit.aliases:
            index.setdefault(fold_text(alias), unit)
    return index


_ALIAS_INDEX = _build_alias_index()


# --- Core Functions ---

def lookup_unit(unit: Optional[str]) -> Optional[UnitDefinition]:
    """Resolve a unit string (any alias, any case) to its table entry."""
    if not unit:
        return None
    key = fold_text(unit).rstrip(".").strip()
    return _ALIAS_INDEX.get(key)


def canonical_unit(unit: Optional[str]) -> Optional[str]:
    """
    Canonical form of a unit string.

    Known units resolve to their canonical value; unknown units are
    returned folded (lowercase, trimmed) so two spellings of the same
    unknown unit still compare equal. Empty input gives None.
    """
    definition = lookup_unit(unit)
    if definition:
        return definition.canonical
    if not unit or not unit.strip():
        return None
    return fold_text(unit)


def classify(unit: Optional[str]) -> Tuple[UnitCategory, float]:
    """Get (category, factor_to_base) for a unit string."""
    definition = lookup_unit(unit)
    if definition is None:
        return "unknown", 1.0
    return definition.category, definition.factor_to_base


def is_volume_unit(unit: Optional[str]) -> bool:
    return classify(unit)[0] == "volume"


def is_weight_unit(unit: Optional[str]) -> bool:
    return classify(unit)[0] == "weight"


def suggested_target(unit: Optional[str]) -> str:
    """Default unit to pre-fill a one-click conversion from `unit`."""
    category, _ = classify(unit)
    if category == "volume":
        return DEFAULT_WEIGHT_UNIT
    if category == "weight":
        return DEFAULT_VOLUME_UNIT
    return DEFAULT_WEIGHT_UNIT


def unit_catalog() -> dict:
    """Units grouped for dropdowns: volume, weight and all (plus bare count)."""
    volume = [{"value": u.canonical, "label": u.label} for u in UNIT_TABLE if u.category == "volume"]
    weight = [{"value": u.canonical, "label": u.label} for u in UNIT_TABLE if u.category == "weight"]
    return {
        "volume": volume,
        "weight": weight,
        "all": volume + weight + [{"value": "", "label": "unidad"}],
    }
