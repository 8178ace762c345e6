"""Manual stock toggles and the stock history trail."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from restoman.core.errors import ApiError
from restoman.models import Dish, StockHistory, User, Variant
from restoman.utils.time import utc_now

StockItem = Dish | Variant

ITEM_LABELS: dict[type, str] = {Dish: "dish", Variant: "variant"}


def record_stock_change(
    db: Session,
    *,
    item_type: str,
    item_id: int,
    action: str,
    actor: User | None = None,
    reason: str | None = None,
    at: datetime | None = None,
) -> None:
    """Stage a history row; the caller owns the commit."""
    db.add(
        StockHistory(
            item_type=item_type,
            item_id=item_id,
            action=action,
            reason=reason,
            actor_user_id=actor.id if actor is not None else None,
            created_at=at or utc_now(),
        )
    )


def set_stock_status(
    db: Session,
    model: type[StockItem],
    item_id: int,
    *,
    is_out_of_stock: bool,
    actor: User,
    restock_time: datetime | None = None,
    reason: str | None = None,
    auto_restock: bool | None = None,
) -> StockItem:
    """Mark a dish or variant in or out of stock on behalf of ``actor``."""
    label = ITEM_LABELS[model]
    item = db.get(model, item_id)
    if item is None:
        raise ApiError(404, f"{label.capitalize()} not found")

    if restock_time is not None and restock_time.tzinfo is not None:
        restock_time = restock_time.astimezone(timezone.utc)

    now = utc_now()
    item.is_out_of_stock = is_out_of_stock
    if is_out_of_stock:
        item.restock_time = restock_time
        item.out_of_stock_reason = reason
        if auto_restock is not None:
            item.auto_restock = auto_restock
    else:
        item.restock_time = None
        item.out_of_stock_reason = None
    item.last_stock_update = now
    item.last_stock_update_by_id = actor.id

    record_stock_change(
        db,
        item_type=label,
        item_id=item.id,
        action="out_of_stock" if is_out_of_stock else "restock",
        actor=actor,
        reason=reason,
        at=now,
    )
    db.commit()
    db.refresh(item)
    return item


def stock_message(label: str, is_out_of_stock: bool) -> str:
    state = "marked as out of stock" if is_out_of_stock else "marked as in stock"
    return f"{label.capitalize()} {state} successfully"
