"""Stock change trail."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from restoman.db.base import Base
from restoman.utils.time import utc_now

STOCK_ITEM_TYPES = ("dish", "variant")
STOCK_ACTIONS = ("out_of_stock", "restock", "auto_restock")


class StockHistory(Base):
    """Stores an append-only trail of stock status changes."""

    __tablename__ = "stock_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    item_type: Mapped[str] = mapped_column(String(16), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    action: Mapped[str] = mapped_column(String(32), nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    actor_user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
