"""Shopping aisle for an ingredient name."""

import re
from typing import Optional, Sequence

from ..core.text import fold_text

OTHER_CATEGORY = "Otros"

# First match wins, so order is significant ("salsa de tomate" is produce).
CATEGORY_KEYWORDS = (
    ("Frutas y Verduras", (
        "lettuce", "tomato", "onion", "garlic", "pepper", "carrot", "celery", "potato",
        "broccoli", "spinach", "kale", "cucumber", "zucchini", "squash", "mushroom",
        "avocado", "lemon", "lime", "orange", "apple", "banana", "berry", "fruit",
        "vegetable", "herb", "cilantro", "parsley", "basil", "mint", "thyme", "rosemary",
        "lechuga", "tomate", "cebolla", "ajo", "pimiento", "zanahoria", "apio", "patata",
        "papa", "brócoli", "espinaca", "pepino", "calabacín", "champiñón", "aguacate",
        "limón", "naranja", "manzana", "plátano", "fruta", "verdura", "hierba", "perejil",
        "albahaca", "menta", "romero",
    )),
    ("Lácteos", (
        "milk", "cheese", "butter", "cream", "yogurt", "sour cream", "egg", "eggs",
        "leche", "queso", "mantequilla", "nata", "crema", "yogur", "huevo", "huevos",
    )),
    ("Carnes y Mariscos", (
        "chicken", "beef", "pork", "lamb", "turkey", "fish", "salmon", "shrimp", "bacon",
        "sausage", "meat", "steak", "ground", "pollo", "res", "cerdo", "cordero", "pavo",
        "pescado", "salmón", "camarón", "tocino", "salchicha", "carne", "bistec", "molida",
    )),
    ("Panadería", (
        "bread", "roll", "bun", "bagel", "tortilla", "pita", "croissant", "pan", "bollo",
        "bolillo",
    )),
    ("Congelados", ("frozen", "ice cream", "congelado", "helado")),
    ("Bebidas", (
        "juice", "soda", "water", "wine", "beer", "coffee", "tea", "jugo", "refresco",
        "agua", "vino", "cerveza", "café", "té",
    )),
    ("Despensa", (
        "flour", "sugar", "salt", "oil", "vinegar", "sauce", "pasta", "rice", "bean", "can",
        "stock", "broth", "spice", "seasoning", "harina", "azúcar", "sal", "aceite",
        "vinagre", "salsa", "arroz", "frijol", "lata", "caldo", "especia", "condimento",
    )),
)

DEFAULT_CATEGORY_ORDER = tuple(name for name, _ in CATEGORY_KEYWORDS) + (OTHER_CATEGORY,)


def _compile(words):
    alternation = "|".join(re.escape(fold_text(w)) for w in words)
    # optional plural ending: "patatas", "limones"
    return re.compile(rf"\b(?:{alternation})(?:e?s)?\b")


_CATEGORY_PATTERNS = tuple((name, _compile(words)) for name, words in CATEGORY_KEYWORDS)


def categorize_ingredient(name: str) -> str:
    folded = fold_text(name)
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(folded):
            return category
    return OTHER_CATEGORY


def category_rank(category: str, order: Optional[Sequence[str]] = None) -> int:
    """Position in the aisle order; unknown categories go last."""
    order = list(order or DEFAULT_CATEGORY_ORDER)
    try:
        return order.index(category)
    except ValueError:
        return len(order) + 999
