"""Table type CRUD helpers."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from restoman.core.errors import ApiError
from restoman.models import TableType, User
from restoman.utils.time import utc_now


def list_table_types(db: Session) -> list[TableType]:
    return list(db.scalars(select(TableType).order_by(TableType.table_type_name.asc())).all())


def get_table_type_or_404(db: Session, table_type_id: int) -> TableType:
    table_type = db.get(TableType, table_type_id)
    if table_type is None:
        raise ApiError(404, "Table type not found")
    return table_type


def _name_taken(db: Session, name: str, exclude_id: int | None = None) -> bool:
    query = select(TableType.id).where(TableType.table_type_name == name)
    if exclude_id is not None:
        query = query.where(TableType.id != exclude_id)
    return db.scalar(query.limit(1)) is not None


def create_table_type(db: Session, *, name: str | None, description: str | None, actor: User) -> TableType:
    """Create a table type owned by ``actor``; names are unique."""
    if not name:
        raise ApiError(400, "Table type name is required")
    if _name_taken(db, name):
        raise ApiError(400, "Table type already exists")

    table_type = TableType(
        table_type_name=name,
        table_type_description=description or "",
        created_by_id=actor.id,
        updated_by_id=actor.id,
    )
    db.add(table_type)
    db.commit()
    db.refresh(table_type)
    return table_type


def update_table_type(
    db: Session,
    table_type_id: int,
    *,
    name: str | None,
    description: str | None,
    description_set: bool,
    actor: User,
) -> TableType:
    """Apply a partial update; updater and timestamp are always refreshed."""
    table_type = get_table_type_or_404(db, table_type_id)
    if name:
        if _name_taken(db, name, exclude_id=table_type.id):
            raise ApiError(400, "Table type already exists")
        table_type.table_type_name = name
    if description_set:
        table_type.table_type_description = description

    table_type.updated_by_id = actor.id
    table_type.updated_at = utc_now()
    db.commit()
    db.refresh(table_type)
    return table_type


def delete_table_type(db: Session, table_type_id: int) -> None:
    table_type = get_table_type_or_404(db, table_type_id)
    db.delete(table_type)
    db.commit()
