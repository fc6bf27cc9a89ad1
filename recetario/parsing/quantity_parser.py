import math
import re
from dataclasses import dataclass
from typing import Optional

UNICODE_FRACTIONS = {
    "½": 1 / 2,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

_GLYPHS = "".join(UNICODE_FRACTIONS)

# Order matters: mixed numbers before simple fractions before plain numbers.
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)")
_FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)")
_GLYPH_RE = re.compile(rf"^(?:(\d+)\s*)?([{_GLYPHS}])")
_NUMBER_RE = re.compile(r"^(\d+(?:[.,]\d+)?|[.,]\d+)")


@dataclass(frozen=True)
class Quantity:
    amount: Optional[float] = None
    unit: Optional[str] = None

    @property
    def is_numeric(self) -> bool:
        return self.amount is not None


def _to_float(text: str) -> float:
    return float(text.replace(",", "."))


def _split_amount(text: str):
    """Return (amount, rest) for the numeric prefix of `text`, or (None, text)."""
    try:
        amount, rest = _match_amount(text)
    except (OverflowError, ValueError):
        # digit runs too long for a float (or for int() itself)
        return None, text
    if amount is None or not math.isfinite(amount):
        return None, text
    return amount, rest


def _match_amount(text: str):
    m = _MIXED_RE.match(text)
    if m:
        whole, num, den = (int(g) for g in m.groups())
        if den == 0:
            return None, text
        return whole + num / den, text[m.end():]

    m = _FRACTION_RE.match(text)
    if m:
        num, den = int(m.group(1)), int(m.group(2))
        if den == 0:
            return None, text
        return num / den, text[m.end():]

    m = _GLYPH_RE.match(text)
    if m:
        whole = int(m.group(1)) if m.group(1) else 0
        return whole + UNICODE_FRACTIONS[m.group(2)], text[m.end():]

    m = _NUMBER_RE.match(text)
    if m:
        return _to_float(m.group(1)), text[m.end():]

    return None, text


def parse_quantity(raw: Optional[str]) -> Quantity:
    """
    Parse free-text quantity like "500g", "1 1/2 taza", "1 ½ cup".

    Whatever follows the number becomes the unit (None for a bare count).
    Text without a leading number ("al gusto", "-2 g") gives an empty
    Quantity; the caller keeps the raw text for display.
    """
    text = (raw or "").strip()
    if not text:
        return Quantity()

    amount, rest = _split_amount(text)
    if amount is None:
        return Quantity()

    unit = rest.strip() or None
    return Quantity(amount=amount, unit=unit)
