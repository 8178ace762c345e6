"""Table type schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TableTypeCreate(BaseModel):
    table_type_name: str | None = None
    table_type_description: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TableTypeUpdate(TableTypeCreate):
    pass


class TableTypeRead(BaseModel):
    id: int
    table_type_name: str
    table_type_description: str | None = None
    created_at: datetime
    updated_at: datetime
    created_by_id: int = Field(alias="createdBy")
    updated_by_id: int = Field(alias="updatedBy")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class TableTypeResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: TableTypeRead


class TableTypeListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[TableTypeRead]
