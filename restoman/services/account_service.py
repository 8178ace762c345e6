"""Account provisioning and login helpers."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from restoman.core.config import Settings
from restoman.core.errors import ApiError
from restoman.core.security import get_password_hash, verify_password
from restoman.models.user import User
from restoman.services.user_service import create_user, get_any_admin, get_user_by_username

logger = logging.getLogger(__name__)


def init_admin_user(db: Session, settings: Settings) -> bool:
    """Ensure at least one admin account exists.

    Returns:
        bool: True when an admin already existed before this call.
    """
    if get_any_admin(db) is not None:
        logger.info("[BOOTSTRAP] Admin user already exists, skipping initialization")
        return True

    logger.info("[BOOTSTRAP] No admin user found, creating default admin...")
    create_user(
        db=db,
        username=settings.admin_username,
        hashed_password=get_password_hash(settings.admin_password),
        role="admin",
        status="active",
    )
    logger.warning(
        "[SECURITY] Default admin account created: %s. Change default password immediately.",
        settings.admin_username,
    )
    return False


def authenticate_user(db: Session, username: str | None, password: str | None) -> User:
    """Check credentials and account status, raising ApiError on failure."""
    if not username or not password:
        raise ApiError(400, "Please provide username and password")

    user = get_user_by_username(db=db, username=username.strip())
    if user is None or not verify_password(password, user.password_hash):
        raise ApiError(401, "Invalid credentials")
    if user.status != "active":
        raise ApiError(403, "Your account is not active")
    return user


def register_user(
    db: Session,
    *,
    username: str | None,
    password: str | None,
    role: str | None,
    status: str | None,
) -> User:
    if not username or not password or not role or not status:
        raise ApiError(400, "Please provide all required fields")
    if get_user_by_username(db=db, username=username) is not None:
        raise ApiError(400, "Username already exists")
    try:
        return create_user(
            db=db,
            username=username,
            hashed_password=get_password_hash(password),
            role=role,
            status=status,
        )
    except ValueError as exc:
        raise ApiError(400, str(exc)) from exc
