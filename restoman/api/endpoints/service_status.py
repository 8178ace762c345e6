"""Service status endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restoman.core.security import require_roles
from restoman.db.session import get_db
from restoman.models import User
from restoman.schemas.service_status import ServiceStatusRead, ServiceStatusResponse, ServiceStatusUpdate
from restoman.services.settings_service import get_or_create_service_status, update_service_status

router: APIRouter = APIRouter()


@router.get("", response_model=ServiceStatusResponse)
def read_service_status(db: Session = Depends(get_db)) -> ServiceStatusResponse:
    status = get_or_create_service_status(db)
    return ServiceStatusResponse(data=ServiceStatusRead.model_validate(status))


@router.put("", response_model=ServiceStatusResponse)
def change_service_status(
    payload: ServiceStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_roles("admin")),
) -> ServiceStatusResponse:
    status = update_service_status(db, payload.model_dump(exclude_none=True))
    return ServiceStatusResponse(
        message="Service status updated successfully",
        data=ServiceStatusRead.model_validate(status),
    )
