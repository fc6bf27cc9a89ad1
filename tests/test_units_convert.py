"""
Tests for the conversion engine.
"""

import pytest
from recetario.services.unit_conversion import convert, convert_quantity


def test_convert_weight_simple():
    # 1 kg = 1000 g
    res = convert(1, "kg", "g")
    assert res.success is True
    assert res.amount == "1000"
    assert res.unit == "g"
    assert res.approximate is False


def test_convert_volume_simple():
    # 14.787 / 4.929 = 3.0
    res = convert(1, "tbsp", "tsp")
    assert res.amount == "3"
    assert res.approximate is False


def test_convert_keeps_requested_unit_spelling():
    res = convert(250, "ml", "tazas")
    assert res.unit == "tazas"
    assert res.amount == "1.06"


def test_convert_cross_flour():
    # 1 cup of flour = 125 g
    res = convert(1, "cup", "g", "harina")
    assert res.success is True
    assert res.amount == "125"
    assert res.approximate is True
    assert res.density_source == "table"


def test_convert_weight_to_volume():
    res = convert(125, "g", "taza", "Harina")
    assert res.amount == "1"
    assert res.unit == "taza"
    assert res.approximate is True


def test_convert_salt_teaspoon():
    # 4.929 ml * 288 g/cup / 236.588 ml/cup ~ 6 g
    res = convert(1, "cucharadita", "g", "sal")
    assert res.amount == "6"


def test_convert_cross_water_default():
    # Unknown ingredient -> water, 236.588 g
    res = convert(1, "cup", "g", "misterio")
    assert res.success is True
    assert res.amount == "236.59"
    assert res.approximate is True
    assert res.density_source == "fallback"
    assert res.density_g_per_ml == 1.0

    assert convert(1, "cup", "g").amount == "236.59"
    assert convert(1, "cup", "g", "").amount == "236.59"


def test_convert_cross_without_default_fails():
    res = convert(1, "cup", "g", "misterio", allow_default_density=False)
    assert res.success is False
    assert res.amount is None

    # A known ingredient still converts
    assert convert(1, "cup", "g", "leche", allow_default_density=False).success is True


def test_convert_custom_default_density():
    res = convert(100, "ml", "g", None, default_density=0.5)
    assert res.amount == "50"


@pytest.mark.parametrize("from_unit, to_unit", [
    ("piezas", "g"),
    ("g", "pizca"),
    ("", "g"),
])
def test_unknown_unit(from_unit, to_unit):
    res = convert(10, from_unit, to_unit)
    assert res.success is False
    assert res.amount is None
    assert res.approximate is False


@pytest.mark.parametrize("a, b", [
    ("cup", "ml"),
    ("kg", "g"),
    ("lb", "oz"),
    ("l", "cup"),
    ("tbsp", "tsp"),
])
def test_same_category_round_trip(a, b):
    value = 3.7
    there = convert(value, a, b)
    back = convert(float(there.amount), b, a)
    assert float(back.amount) == pytest.approx(value, rel=0.01)


def test_convert_quantity_text():
    res = convert_quantity("1 1/2", "taza", "ml")
    assert res.amount == "354.88"
    assert res.unit == "ml"


def test_convert_quantity_non_numeric():
    res = convert_quantity("al gusto", "g", "cup")
    assert res.success is False
    assert res.amount is None
    assert res.unit == "cup"


def test_to_dict():
    data = convert(1, "cup", "g", "azúcar").to_dict()
    assert data["success"] is True
    assert data["amount"] == "200"
    assert data["unit"] == "g"
    assert data["approximate"] is True
    assert data["density_source"] == "table"
