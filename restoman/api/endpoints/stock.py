"""Direct restock endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from restoman.core.errors import error_body
from restoman.db.session import get_db
from restoman.schemas.stock import RestockCounts, RestockResponse
from restoman.services.restock_service import restock_due_items

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/restock", response_model=None)
def restock(db: Session = Depends(get_db)) -> RestockResponse | JSONResponse:
    try:
        counts = restock_due_items(db)
    except Exception:
        logger.exception("[RESTOCK] Error in auto-restock process")
        return JSONResponse(error_body("Server error during auto-restock"), status_code=500)
    return RestockResponse(results=RestockCounts(dishes=counts.dishes, variants=counts.variants))
