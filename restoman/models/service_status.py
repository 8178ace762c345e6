"""Service availability toggles."""

from sqlalchemy import Boolean
from sqlalchemy.orm import Mapped, mapped_column

from restoman.db.base import Base

SERVICE_STATUS_ID: int = 1


class ServiceStatus(Base):
    """Singleton row (id=1) of ordering channel switches."""

    __tablename__ = "service_status"

    id: Mapped[int] = mapped_column(primary_key=True, default=SERVICE_STATUS_ID)
    dine_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    takeaway: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    delivery: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    qr_ordering: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    takeaway_customer_end: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    delivery_customer_end: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    zomato: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
