"""Table type endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restoman.core.security import require_roles
from restoman.db.session import get_db
from restoman.models import User
from restoman.schemas.table_type import (
    TableTypeCreate,
    TableTypeListResponse,
    TableTypeRead,
    TableTypeResponse,
    TableTypeUpdate,
)
from restoman.services import table_type_service

router: APIRouter = APIRouter()


@router.get("", response_model=TableTypeListResponse)
def list_table_types(db: Session = Depends(get_db)) -> TableTypeListResponse:
    table_types = table_type_service.list_table_types(db)
    return TableTypeListResponse(
        count=len(table_types),
        data=[TableTypeRead.model_validate(item) for item in table_types],
    )


@router.post("", response_model=TableTypeResponse)
def create_table_type(
    payload: TableTypeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin", "biller")),
) -> TableTypeResponse:
    table_type = table_type_service.create_table_type(
        db,
        name=payload.table_type_name,
        description=payload.table_type_description,
        actor=current_user,
    )
    return TableTypeResponse(
        message="Table type created successfully",
        data=TableTypeRead.model_validate(table_type),
    )


@router.get("/{table_type_id}", response_model=TableTypeResponse)
def get_table_type(table_type_id: int, db: Session = Depends(get_db)) -> TableTypeResponse:
    table_type = table_type_service.get_table_type_or_404(db, table_type_id)
    return TableTypeResponse(data=TableTypeRead.model_validate(table_type))


@router.put("/{table_type_id}", response_model=TableTypeResponse)
def update_table_type(
    table_type_id: int,
    payload: TableTypeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin", "biller")),
) -> TableTypeResponse:
    table_type = table_type_service.update_table_type(
        db,
        table_type_id,
        name=payload.table_type_name,
        description=payload.table_type_description,
        description_set="table_type_description" in payload.model_fields_set,
        actor=current_user,
    )
    return TableTypeResponse(
        message="Table type updated successfully",
        data=TableTypeRead.model_validate(table_type),
    )


@router.delete("/{table_type_id}")
def delete_table_type(
    table_type_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_roles("admin")),
) -> dict[str, bool | str]:
    table_type_service.delete_table_type(db, table_type_id)
    return {"success": True, "message": "Table type deleted successfully"}
