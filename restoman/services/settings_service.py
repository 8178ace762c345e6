"""Service status singleton helpers."""

from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restoman.models.service_status import SERVICE_STATUS_ID, ServiceStatus


def get_or_create_service_status(db: Session) -> ServiceStatus:
    """Return the singleton row, creating it with every channel enabled."""
    status = db.get(ServiceStatus, SERVICE_STATUS_ID)
    if status is not None:
        return status

    db.add(ServiceStatus(id=SERVICE_STATUS_ID))
    try:
        db.commit()
    except IntegrityError:
        # Another request inserted the row first.
        db.rollback()
    status = db.get(ServiceStatus, SERVICE_STATUS_ID)
    if status is None:
        raise RuntimeError("Service status row could not be created")
    return status


def update_service_status(db: Session, changes: dict[str, Any]) -> ServiceStatus:
    """Persist the given toggles; keys not present are left unchanged."""
    status = get_or_create_service_status(db)
    for key, value in changes.items():
        if value is None or not hasattr(ServiceStatus, key):
            continue
        setattr(status, key, bool(value))
    db.commit()
    db.refresh(status)
    return status
