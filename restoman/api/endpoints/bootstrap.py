"""One-shot initialization endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from restoman.core.config import Settings
from restoman.core.errors import error_body
from restoman.core.security import get_settings
from restoman.db.session import get_db
from restoman.services.account_service import init_admin_user

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/init", response_model=None)
def initialize(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict[str, bool | str] | JSONResponse:
    try:
        init_admin_user(db, settings)
    except Exception:
        logger.exception("[BOOTSTRAP] Initialization error")
        return JSONResponse(error_body("Initialization failed"), status_code=500)
    return {"success": True, "message": "Initialization completed"}
