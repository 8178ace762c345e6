"""Schema exports."""

from restoman.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserEnvelope,
    UserPublic,
)
from restoman.schemas.job import JobResult
from restoman.schemas.service_status import ServiceStatusRead, ServiceStatusResponse, ServiceStatusUpdate
from restoman.schemas.stock import (
    DishStockRead,
    RestockCounts,
    RestockResponse,
    StockUpdate,
    VariantStockRead,
)
from restoman.schemas.table_type import (
    TableTypeCreate,
    TableTypeListResponse,
    TableTypeRead,
    TableTypeResponse,
    TableTypeUpdate,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserEnvelope",
    "UserPublic",
    "JobResult",
    "ServiceStatusRead",
    "ServiceStatusResponse",
    "ServiceStatusUpdate",
    "DishStockRead",
    "RestockCounts",
    "RestockResponse",
    "StockUpdate",
    "VariantStockRead",
    "TableTypeCreate",
    "TableTypeListResponse",
    "TableTypeRead",
    "TableTypeResponse",
    "TableTypeUpdate",
]
