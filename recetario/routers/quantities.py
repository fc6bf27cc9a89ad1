"""
Router for quantity text utilities used by the ingredient editor,
the quantity stepper and the shopping list.
"""

from fastapi import APIRouter

from ..parsing.quantity_format import format_quantity
from ..parsing.quantity_parser import parse_quantity
from ..schemas import (
    QuantityCombineRequest,
    QuantityFormatRequest,
    QuantityParseRequest,
    QuantityParseResponse,
    QuantityResponse,
    QuantityScaleRequest,
    QuantityStepRequest,
)
from ..services.quantity_combine import combine
from ..services.scaling import scale, step_quantity
from ..settings import settings

router = APIRouter()


@router.post("/parse", response_model=QuantityParseResponse)
def parse(req: QuantityParseRequest):
    parsed = parse_quantity(req.raw)
    display = format_quantity(parsed.amount, parsed.unit) if parsed.is_numeric else req.raw.strip()
    return QuantityParseResponse(amount=parsed.amount, unit=parsed.unit, display=display)


@router.post("/format", response_model=QuantityResponse)
def format_(req: QuantityFormatRequest):
    mode = req.mode or settings.quantity_display
    return QuantityResponse(quantity=format_quantity(req.amount, req.unit, mode))


@router.post("/scale", response_model=QuantityResponse)
def scale_quantity(req: QuantityScaleRequest):
    return QuantityResponse(quantity=scale(req.raw, req.multiplier))


@router.post("/step", response_model=QuantityResponse)
def step(req: QuantityStepRequest):
    return QuantityResponse(quantity=step_quantity(req.raw, req.delta))


@router.post("/combine", response_model=QuantityResponse)
def combine_quantities(req: QuantityCombineRequest):
    return QuantityResponse(quantity=combine(req.a, req.b, req.ingredient_name))
