"""Stock status request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StockUpdate(BaseModel):
    """Payload toggling an item in or out of stock."""

    is_out_of_stock: bool
    restock_time: datetime | None = None
    reason: str | None = None
    auto_restock: bool | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StockStatusRead(BaseModel):
    id: int
    is_out_of_stock: bool
    restock_time: datetime | None = None
    out_of_stock_reason: str | None = None
    auto_restock: bool
    last_stock_update: datetime | None = None
    last_stock_update_by_id: int | None = Field(default=None, alias="lastStockUpdateBy")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class DishStockRead(StockStatusRead):
    dish_name: str


class VariantStockRead(StockStatusRead):
    variant_name: str
    dish_id: int | None = None


class DishStockResponse(BaseModel):
    success: bool = True
    message: str
    data: DishStockRead


class VariantStockResponse(BaseModel):
    success: bool = True
    message: str
    data: VariantStockRead


class RestockCounts(BaseModel):
    dishes: int
    variants: int


class RestockResponse(BaseModel):
    success: bool = True
    message: str = "Auto-restock check completed"
    results: RestockCounts
