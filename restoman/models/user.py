"""User ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from restoman.db.base import Base
from restoman.utils.time import utc_now

USER_ROLES = ("admin", "biller", "captain")
USER_STATUSES = ("active", "inactive")


class User(Base):
    """Staff account used for username/password login."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(Enum(*USER_ROLES, name="user_role"), nullable=False)
    status: Mapped[str] = mapped_column(Enum(*USER_STATUSES, name="user_status"), nullable=False, default="active")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)


def normalize_user_role(role: str | None) -> str:
    """Normalize role input and reject unknown values."""
    normalized = str(role or "").strip().lower()
    if normalized not in USER_ROLES:
        raise ValueError(f"Unsupported role: {role}")
    return normalized


def normalize_user_status(status: str | None) -> str:
    normalized = str(status or "").strip().lower()
    if normalized not in USER_STATUSES:
        raise ValueError(f"Unsupported status: {status}")
    return normalized
