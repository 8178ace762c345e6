"""Menu ORM models carrying stock status."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restoman.db.base import Base


class StockStatusMixin:
    """Out-of-stock block shared by dishes and variants."""

    is_out_of_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    restock_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    out_of_stock_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    auto_restock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_stock_update: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_stock_update_by_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)


class Dish(StockStatusMixin, Base):
    __tablename__ = "dishes"

    id: Mapped[int] = mapped_column(primary_key=True)
    dish_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    variants: Mapped[list["Variant"]] = relationship(back_populates="dish")


class Variant(StockStatusMixin, Base):
    __tablename__ = "variants"

    id: Mapped[int] = mapped_column(primary_key=True)
    dish_id: Mapped[int | None] = mapped_column(ForeignKey("dishes.id"), nullable=True, index=True)
    variant_name: Mapped[str] = mapped_column(String(255), nullable=False)

    dish: Mapped[Dish | None] = relationship(back_populates="variants")
