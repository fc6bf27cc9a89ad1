import re
import unicodedata


def fold_accents(text: str) -> str:
    """Strip combining marks so 'azúcar' and 'azucar' compare equal."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_text(text: str) -> str:
    """
    Lowercase, fold accents and collapse whitespace.
    Used for every table lookup (units, densities, categories).
    """
    if not text:
        return ""
    s = fold_accents(text).lower()
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def normalize_ingredient_key(name: str) -> str:
    """
    Key used to fold shopping-list lines by ingredient.
    Only case, accents and whitespace are normalized ("tomate" != "tomates").
    """
    return fold_text(name)
