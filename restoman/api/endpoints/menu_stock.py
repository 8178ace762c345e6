"""Dish and variant stock toggles."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restoman.core.security import require_roles
from restoman.db.session import get_db
from restoman.models import Dish, User, Variant
from restoman.schemas.stock import (
    DishStockRead,
    DishStockResponse,
    StockUpdate,
    VariantStockRead,
    VariantStockResponse,
)
from restoman.services.stock_service import set_stock_status, stock_message

router: APIRouter = APIRouter()
STOCK_ROLES = ("admin", "biller", "captain")


@router.put("/dishes/{dish_id}/stock", response_model=DishStockResponse)
def update_dish_stock(
    dish_id: int,
    payload: StockUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(*STOCK_ROLES)),
) -> DishStockResponse:
    dish = set_stock_status(
        db,
        Dish,
        dish_id,
        is_out_of_stock=payload.is_out_of_stock,
        actor=current_user,
        restock_time=payload.restock_time,
        reason=payload.reason,
        auto_restock=payload.auto_restock,
    )
    return DishStockResponse(
        message=stock_message("dish", payload.is_out_of_stock),
        data=DishStockRead.model_validate(dish),
    )


@router.put("/variants/{variant_id}/stock", response_model=VariantStockResponse)
def update_variant_stock(
    variant_id: int,
    payload: StockUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(*STOCK_ROLES)),
) -> VariantStockResponse:
    variant = set_stock_status(
        db,
        Variant,
        variant_id,
        is_out_of_stock=payload.is_out_of_stock,
        actor=current_user,
        restock_time=payload.restock_time,
        reason=payload.reason,
        auto_restock=payload.auto_restock,
    )
    return VariantStockResponse(
        message=stock_message("variant", payload.is_out_of_stock),
        data=VariantStockRead.model_validate(variant),
    )
