from typing import Literal, Optional

DisplayMode = Literal["decimal", "cook"]

# Fractional part -> glyph, for cook-style display
COMMON_FRACTIONS = (
    (1 / 8, "⅛"),
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (3 / 8, "⅜"),
    (1 / 2, "½"),
    (5 / 8, "⅝"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
    (7 / 8, "⅞"),
)

FRACTION_TOLERANCE = 0.02


def format_decimal(value: float) -> str:
    """Two decimals, trailing zeros stripped: 500.00 -> '500', 1.50 -> '1.5'."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _format_cook(value: float) -> str:
    whole = int(value)
    decimal = value - whole
    if decimal < FRACTION_TOLERANCE and whole > 0:
        return str(whole)
    for frac, glyph in COMMON_FRACTIONS:
        if abs(decimal - frac) < FRACTION_TOLERANCE:
            return f"{whole} {glyph}" if whole > 0 else glyph
    # Close enough to the next whole number
    if 1 - decimal < FRACTION_TOLERANCE:
        return str(whole + 1)
    return format_decimal(value)


def format_amount(value: float, mode: DisplayMode = "decimal") -> str:
    if mode == "cook" and value > 0:
        return _format_cook(value)
    return format_decimal(value)


def format_quantity(
    amount: Optional[float],
    unit: Optional[str] = None,
    mode: DisplayMode = "decimal",
) -> str:
    """
    Render an amount/unit pair back to display text.
    A missing amount renders the unit alone; a missing unit renders the bare number.
    """
    unit = (unit or "").strip()
    if amount is None:
        return unit
    number = format_amount(amount, mode)
    return f"{number} {unit}" if unit else number
