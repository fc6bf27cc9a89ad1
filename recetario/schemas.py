"""Pydantic schemas for the recetario API.

Request/response models for:
- Units (catalog, classification, conversion)
- Quantities (parse, format, scale, step, combine)
- Shopping list building
"""

from typing import Optional, Literal

from pydantic import BaseModel, Field


# --- Units ---

class UnitOption(BaseModel):
    value: str
    label: str


class UnitCatalogResponse(BaseModel):
    volume: list[UnitOption]
    weight: list[UnitOption]
    all: list[UnitOption]


class UnitClassifyResponse(BaseModel):
    unit: str
    canonical: Optional[str]
    category: Literal["volume", "weight", "unknown"]
    factor_to_base: float
    suggested_target: str


class UnitConvertRequest(BaseModel):
    amount: str = Field(..., min_length=1, max_length=50)  # free text, e.g. "1 1/2"
    from_unit: str = Field(..., max_length=50)
    to_unit: Optional[str] = Field(None, max_length=50)
    ingredient_name: Optional[str] = Field(None, max_length=200)


class UnitConvertResponse(BaseModel):
    success: bool
    amount: Optional[str] = None
    unit: Optional[str] = None
    approximate: bool = False
    density_g_per_ml: Optional[float] = None
    density_source: Optional[Literal["table", "fallback"]] = None


# --- Quantities ---

class QuantityParseRequest(BaseModel):
    raw: str = Field(..., max_length=200)


class QuantityParseResponse(BaseModel):
    amount: Optional[float]
    unit: Optional[str]
    display: str  # what to show: reformatted, or the raw text when not numeric


class QuantityFormatRequest(BaseModel):
    amount: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=50)
    mode: Optional[Literal["decimal", "cook"]] = None


class QuantityScaleRequest(BaseModel):
    raw: str = Field(..., max_length=200)
    multiplier: float = Field(..., gt=0)


class QuantityStepRequest(BaseModel):
    raw: Optional[str] = Field(None, max_length=200)
    delta: float = 1


class QuantityCombineRequest(BaseModel):
    a: str = Field(..., max_length=500)
    b: str = Field(..., max_length=500)
    ingredient_name: str = Field("", max_length=200)


class QuantityResponse(BaseModel):
    quantity: Optional[str]


# --- Shopping ---

class ShoppingAlternativeIn(BaseModel):
    """Substitute ingredient a recipe line can be swapped for."""
    name: str = Field("", max_length=200)
    amount: str = Field("", max_length=50)
    unit: str = Field("", max_length=50)
    amount2: str = Field("", max_length=50)
    unit2: str = Field("", max_length=50)


class ShoppingIngredientIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    amount: str = Field("", max_length=50)
    unit: str = Field("", max_length=50)
    # second recipe variant (e.g. a larger mould)
    amount2: str = Field("", max_length=50)
    unit2: str = Field("", max_length=50)
    alternative: Optional[ShoppingAlternativeIn] = None
    is_header: bool = False


class ShoppingMealIn(BaseModel):
    recipe_title: str = Field(..., max_length=200)
    servings_multiplier: float = Field(1, gt=0)
    selected_variant: Literal[1, 2] = 1
    # ingredient index -> use the alternative ingredient
    alternative_selections: dict[int, bool] = {}
    ingredients: list[ShoppingIngredientIn] = []


class ShoppingItemIn(BaseModel):
    """An unchecked item already on the user's list."""
    id: str
    name: str
    quantity: Optional[str] = None
    recipe_sources: list[str] = []


class ShoppingEntry(BaseModel):
    name: str
    quantity: str
    category: str
    recipes: list[str] = []


class ShoppingItemUpdate(BaseModel):
    id: str
    quantity: str
    recipe_sources: list[str]


class ShoppingBuildRequest(BaseModel):
    meals: list[ShoppingMealIn]
    existing: list[ShoppingItemIn] = []
    category_order: Optional[list[str]] = None


class ShoppingBuildResponse(BaseModel):
    items: list[ShoppingEntry]
    to_update: list[ShoppingItemUpdate] = []
    to_insert: list[ShoppingEntry] = []
