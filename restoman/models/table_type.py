"""Table category ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from restoman.db.base import Base
from restoman.utils.time import utc_now


class TableType(Base):
    """Named, uniquely keyed category for dining tables."""

    __tablename__ = "table_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    table_type_name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    table_type_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    created_by_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    updated_by_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
