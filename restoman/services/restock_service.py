"""Automatic restock of items whose restock time has passed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from restoman.models import Dish, Variant
from restoman.services.stock_service import ITEM_LABELS, StockItem, record_stock_change
from restoman.utils.time import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestockCounts:
    dishes: int
    variants: int

    @property
    def total(self) -> int:
        return self.dishes + self.variants


def _due_items(db: Session, model: type[StockItem], now: datetime) -> list[StockItem]:
    return list(
        db.scalars(
            select(model).where(
                model.is_out_of_stock.is_(True),
                model.auto_restock.is_(True),
                model.restock_time.is_not(None),
                model.restock_time <= now,
            )
        ).all()
    )


def _restock(db: Session, model: type[StockItem], now: datetime) -> int:
    items = _due_items(db, model, now)
    for item in items:
        item.is_out_of_stock = False
        item.last_stock_update = now
        record_stock_change(
            db,
            item_type=ITEM_LABELS[model],
            item_id=item.id,
            action="auto_restock",
            reason=item.out_of_stock_reason,
            at=now,
        )
    return len(items)


def restock_due_items(db: Session, now: datetime | None = None) -> RestockCounts:
    """Bring every due auto-restock dish and variant back in stock.

    All updates and history rows are committed together; on error the
    session is rolled back and the exception propagates.
    """
    now = now or utc_now()
    try:
        counts = RestockCounts(dishes=_restock(db, Dish, now), variants=_restock(db, Variant, now))
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("[RESTOCK] Restocked %s dishes and %s variants.", counts.dishes, counts.variants)
    return counts
