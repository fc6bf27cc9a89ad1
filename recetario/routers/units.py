"""
Router for unit catalog and conversion utilities.
"""

from fastapi import APIRouter, Query

from ..schemas import UnitCatalogResponse, UnitClassifyResponse, UnitConvertRequest, UnitConvertResponse
from ..services.unit_conversion import convert_quantity
from ..services.units import canonical_unit, classify, suggested_target, unit_catalog
from ..settings import settings

router = APIRouter()


@router.get("", response_model=UnitCatalogResponse)
def list_units():
    """Units grouped for dropdowns."""
    return unit_catalog()


@router.get("/classify", response_model=UnitClassifyResponse)
def classify_unit(unit: str = Query(..., max_length=50)):
    category, factor = classify(unit)
    return UnitClassifyResponse(
        unit=unit,
        canonical=canonical_unit(unit),
        category=category,
        factor_to_base=factor,
        suggested_target=suggested_target(unit),
    )


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(req: UnitConvertRequest):
    """
    Convert an amount to another unit.
    Without `to_unit`, the suggested opposite unit is used (volume -> g, weight -> cup).
    """
    to_unit = req.to_unit or suggested_target(req.from_unit)

    result = convert_quantity(
        req.amount,
        req.from_unit,
        to_unit,
        req.ingredient_name,
        allow_default_density=settings.allow_default_density,
        default_density=settings.fallback_density_g_per_ml,
    )
    return UnitConvertResponse(**result.to_dict())
