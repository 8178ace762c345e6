"""API router composition."""

from fastapi import APIRouter

from restoman.api.endpoints import auth, bootstrap, cron, menu_stock, service_status, stock, table_types

api_router: APIRouter = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(bootstrap.router, tags=["bootstrap"])
api_router.include_router(cron.router, prefix="/cron", tags=["cron"])
api_router.include_router(stock.router, prefix="/stock", tags=["stock"])
api_router.include_router(menu_stock.router, prefix="/menu", tags=["stock"])
api_router.include_router(table_types.router, prefix="/tables/types", tags=["tables"])
api_router.include_router(service_status.router, prefix="/service-status", tags=["service-status"])
