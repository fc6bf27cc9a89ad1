def test_ready(client):
    response = client.get("/api/ready")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_unit_catalog(client):
    response = client.get("/api/units")
    assert response.status_code == 200
    data = response.json()
    assert data["volume"][0] == {"value": "cup", "label": "taza"}
    assert data["all"][-1] == {"value": "", "label": "unidad"}


def test_classify_unit(client):
    response = client.get("/api/units/classify", params={"unit": "Tazas"})
    assert response.status_code == 200
    data = response.json()
    assert data["canonical"] == "cup"
    assert data["category"] == "volume"
    assert data["factor_to_base"] == 236.588
    assert data["suggested_target"] == "g"


def test_convert_cross_flour(client):
    response = client.post("/api/units/convert", json={
        "amount": "1",
        "from_unit": "cup",
        "to_unit": "g",
        "ingredient_name": "harina",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["amount"] == "125"
    assert data["approximate"] is True


def test_convert_uses_suggested_target(client):
    # 500 g of flour is 4 cups
    response = client.post("/api/units/convert", json={
        "amount": "500",
        "from_unit": "g",
        "ingredient_name": "harina",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["unit"] == "cup"
    assert data["amount"] == "4"


def test_convert_unknown_unit(client):
    response = client.post("/api/units/convert", json={
        "amount": "10",
        "from_unit": "glarps",
        "to_unit": "g",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["amount"] is None


def test_parse(client):
    response = client.post("/api/quantities/parse", json={"raw": "500g"})
    assert response.json() == {"amount": 500.0, "unit": "g", "display": "500 g"}

    response = client.post("/api/quantities/parse", json={"raw": " al gusto "})
    assert response.json() == {"amount": None, "unit": None, "display": "al gusto"}


def test_format_cook_mode(client):
    response = client.post("/api/quantities/format", json={"amount": 1.5, "unit": "taza", "mode": "cook"})
    assert response.json()["quantity"] == "1 ½ taza"

    response = client.post("/api/quantities/format", json={"amount": 1.5, "unit": "taza"})
    assert response.json()["quantity"] == "1.5 taza"


def test_scale(client):
    response = client.post("/api/quantities/scale", json={"raw": "2 kg", "multiplier": 1.5})
    assert response.status_code == 200
    assert response.json()["quantity"] == "3 kg"


def test_scale_rejects_non_positive_multiplier(client):
    response = client.post("/api/quantities/scale", json={"raw": "2 kg", "multiplier": 0})
    assert response.status_code == 422


def test_step(client):
    response = client.post("/api/quantities/step", json={"raw": "2 kg", "delta": -1})
    assert response.json()["quantity"] == "1 kg"


def test_combine(client):
    response = client.post("/api/quantities/combine", json={
        "a": "2 piezas", "b": "al gusto", "ingredient_name": "sal",
    })
    assert response.json()["quantity"] == "2 piezas + al gusto"


def test_shopping_build(client):
    response = client.post("/api/shopping/build", json={
        "meals": [
            {"recipe_title": "Pan", "servings_multiplier": 2, "ingredients": [
                {"name": "Harina", "amount": "250", "unit": "g"},
                {"name": "Sal", "amount": "1", "unit": "cucharadita"},
            ]},
            {"recipe_title": "Galletas", "ingredients": [
                {"name": "harina", "amount": "1", "unit": "kg"},
            ]},
        ],
        "existing": [{"id": "x1", "name": "Sal", "quantity": "al gusto"}],
    })
    assert response.status_code == 200
    data = response.json()

    names = [item["name"] for item in data["items"]]
    assert names == ["Harina", "Sal"]
    assert data["items"][0]["quantity"] == "1500 g"
    assert data["items"][0]["recipes"] == ["Pan", "Galletas"]

    assert data["to_update"] == [{
        "id": "x1",
        "quantity": "al gusto + 2 cucharadita",
        "recipe_sources": ["Pan"],
    }]
    assert [e["name"] for e in data["to_insert"]] == ["Harina"]


def test_shopping_build_variant_and_alternative(client):
    response = client.post("/api/shopping/build", json={
        "meals": [
            {"recipe_title": "Bizcocho", "selected_variant": 2, "alternative_selections": {"0": True},
             "ingredients": [
                 {"name": "Mantequilla", "amount": "100", "unit": "g",
                  "alternative": {"name": "Aceite", "amount": "80", "unit": "ml", "amount2": "120"}},
             ]},
        ],
    })
    assert response.status_code == 200
    assert response.json()["items"] == [{
        "name": "Aceite", "quantity": "120 ml", "category": "Despensa", "recipes": ["Bizcocho"],
    }]


def test_shopping_build_rejects_unknown_variant(client):
    response = client.post("/api/shopping/build", json={
        "meals": [{"recipe_title": "Pan", "selected_variant": 3, "ingredients": []}],
    })
    assert response.status_code == 422


def test_combine_huge_number_does_not_fail(client):
    huge = "9" * 320 + "/1 g"
    response = client.post("/api/quantities/combine", json={"a": huge, "b": "1 g", "ingredient_name": "sal"})
    assert response.status_code == 200
    assert response.json()["quantity"] == f"{huge} + 1 g"


def test_unit_catalog_lists_every_table_unit(client):
    data = client.get("/api/units").json()
    assert {"value": "fl oz", "label": "onza líquida"} in data["volume"]
    assert len(data["all"]) == len(data["volume"]) + len(data["weight"]) + 1
