from recetario.core.text import fold_accents, fold_text, normalize_ingredient_key


def test_fold_accents():
    assert fold_accents("azúcar moreno") == "azucar moreno"
    assert fold_accents("Champiñón") == "Champinon"
    assert fold_accents("") == ""


def test_fold_text():
    assert fold_text("  Harina   de  TRIGO ") == "harina de trigo"
    assert fold_text(None) == ""


def test_ingredient_key():
    assert normalize_ingredient_key("Azúcar ") == normalize_ingredient_key("azucar")
    assert normalize_ingredient_key("Tomate") != normalize_ingredient_key("Tomates")
