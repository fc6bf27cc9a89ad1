"""
Ingredient densities for volume <-> weight conversion.

Values are kept as grams per US cup, the way they appear on kitchen
charts, and exposed as g/ml.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.text import fold_text
from .units import CUP_ML


@dataclass(frozen=True)
class DensityEntry:
    keyword: str
    grams_per_ml: float


def _per_cup(keyword: str, grams_per_cup: float) -> DensityEntry:
    return DensityEntry(keyword, grams_per_cup / CUP_ML)


WATER_DENSITY = 1.0

DENSITY_TABLE: Tuple[DensityEntry, ...] = (
    # Flours
    _per_cup("flour", 125),
    _per_cup("harina", 125),
    _per_cup("all-purpose flour", 125),
    _per_cup("harina de trigo", 125),
    _per_cup("bread flour", 127),
    _per_cup("harina de fuerza", 127),
    _per_cup("whole wheat flour", 120),
    _per_cup("harina integral", 120),
    _per_cup("almond flour", 96),
    _per_cup("harina de almendra", 96),
    _per_cup("coconut flour", 112),
    _per_cup("harina de coco", 112),
    # Sugars
    _per_cup("sugar", 200),
    _per_cup("azúcar", 200),
    _per_cup("white sugar", 200),
    _per_cup("azúcar blanco", 200),
    _per_cup("brown sugar", 220),
    _per_cup("azúcar moreno", 220),
    _per_cup("powdered sugar", 120),
    _per_cup("azúcar glas", 120),
    _per_cup("azúcar glass", 120),
    _per_cup("icing sugar", 120),
    _per_cup("honey", 340),
    _per_cup("miel", 340),
    _per_cup("maple syrup", 322),
    _per_cup("sirope de arce", 322),
    # Fats
    _per_cup("butter", 227),
    _per_cup("mantequilla", 227),
    _per_cup("oil", 218),
    _per_cup("aceite", 218),
    _per_cup("olive oil", 216),
    _per_cup("aceite de oliva", 216),
    _per_cup("vegetable oil", 218),
    _per_cup("aceite vegetal", 218),
    _per_cup("coconut oil", 218),
    _per_cup("aceite de coco", 218),
    # Dairy
    _per_cup("milk", 245),
    _per_cup("leche", 245),
    _per_cup("cream", 238),
    _per_cup("nata", 238),
    _per_cup("crema", 238),
    _per_cup("heavy cream", 238),
    _per_cup("nata para montar", 238),
    _per_cup("sour cream", 242),
    _per_cup("crema agria", 242),
    _per_cup("yogurt", 245),
    _per_cup("greek yogurt", 284),
    _per_cup("yogur griego", 284),
    _per_cup("cream cheese", 232),
    _per_cup("queso crema", 232),
    # Liquids
    _per_cup("water", 237),
    _per_cup("agua", 237),
    # Grains & starches
    _per_cup("rice", 185),
    _per_cup("arroz", 185),
    _per_cup("oats", 80),
    _per_cup("avena", 80),
    _per_cup("rolled oats", 80),
    _per_cup("copos de avena", 80),
    _per_cup("cornstarch", 128),
    _per_cup("maicena", 128),
    _per_cup("almidón de maíz", 128),
    # Nuts & seeds
    _per_cup("almonds", 143),
    _per_cup("almendras", 143),
    _per_cup("walnuts", 120),
    _per_cup("nueces", 120),
    _per_cup("pecans", 109),
    _per_cup("nueces pecanas", 109),
    _per_cup("peanuts", 146),
    _per_cup("cacahuetes", 146),
    _per_cup("maní", 146),
    _per_cup("cashews", 137),
    _per_cup("anacardos", 137),
    # Chocolate & cocoa
    _per_cup("cocoa powder", 86),
    _per_cup("cacao en polvo", 86),
    _per_cup("chocolate chips", 170),
    _per_cup("chispas de chocolate", 170),
    # Other
    _per_cup("salt", 288),
    _per_cup("sal", 288),
    _per_cup("baking powder", 230),
    _per_cup("polvo de hornear", 230),
    _per_cup("levadura química", 230),
    _per_cup("baking soda", 288),
    _per_cup("bicarbonato", 288),
    _per_cup("yeast", 128),
    _per_cup("levadura", 128),
)

_FOLDED = tuple((fold_text(entry.keyword), entry) for entry in DENSITY_TABLE)


def find_density(ingredient_name: Optional[str]) -> Optional[DensityEntry]:
    """
    Density entry for an ingredient name, or None.

    Exact (case/accent-insensitive) keyword first. Otherwise every entry
    whose keyword contains the name or is contained in it is a candidate
    and the longest keyword wins; ties keep table order.
    """
    name = fold_text(ingredient_name or "")
    if not name:
        return None

    for keyword, entry in _FOLDED:
        if keyword == name:
            return entry

    best = None
    best_len = 0
    for keyword, entry in _FOLDED:
        if keyword in name or name in keyword:
            if len(keyword) > best_len:
                best, best_len = entry, len(keyword)
    return best
