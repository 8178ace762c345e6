"""Service status schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ServiceStatusRead(BaseModel):
    dine_in: bool
    takeaway: bool
    delivery: bool
    qr_ordering: bool
    takeaway_customer_end: bool
    delivery_customer_end: bool
    zomato: bool

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class ServiceStatusUpdate(BaseModel):
    """Partial update; omitted toggles keep their current value."""

    dine_in: bool | None = None
    takeaway: bool | None = None
    delivery: bool | None = None
    qr_ordering: bool | None = None
    takeaway_customer_end: bool | None = None
    delivery_customer_end: bool | None = None
    zomato: bool | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ServiceStatusResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: ServiceStatusRead
