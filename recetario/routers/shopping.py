from fastapi import APIRouter

from ..schemas import ShoppingBuildRequest, ShoppingBuildResponse
from ..services.shopping_list import build_shopping_list, merge_into_existing

router = APIRouter()


@router.post("/build", response_model=ShoppingBuildResponse)
def build_list(req: ShoppingBuildRequest):
    """
    Aggregate the ingredients of the planned meals into shopping entries,
    and work out how they merge into the items already on the list.
    """
    items = build_shopping_list(req.meals, req.category_order)
    to_update, to_insert = merge_into_existing(req.existing, items)
    return ShoppingBuildResponse(items=items, to_update=to_update, to_insert=to_insert)
