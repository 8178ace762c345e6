"""Application models package."""

from restoman.models.menu import Dish, Variant
from restoman.models.service_status import ServiceStatus
from restoman.models.stock_history import StockHistory
from restoman.models.table_type import TableType
from restoman.models.user import User

__all__ = ["User", "ServiceStatus", "TableType", "Dish", "Variant", "StockHistory"]
