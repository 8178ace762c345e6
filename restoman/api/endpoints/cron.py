"""Cron-triggered job endpoints."""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from restoman.core.errors import error_body
from restoman.core.security import require_cron_token
from restoman.schemas.job import JobResult

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)

RestockRunner = Callable[[], Any]


def get_restock_runner(request: Request) -> RestockRunner:
    return request.app.state.restock_runner


@router.api_route(
    "/restock",
    methods=["GET", "POST"],
    response_model=None,
    dependencies=[Depends(require_cron_token)],
)
def cron_restock(runner: RestockRunner = Depends(get_restock_runner)) -> JSONResponse:
    """Run one restock cycle and relay its result unchanged."""
    try:
        raw = runner()
        result = JobResult.model_validate(raw)
        body = jsonable_encoder(raw if isinstance(raw, dict) else result.model_dump(exclude_unset=True))
    except Exception:
        logger.exception("[CRON] Error in auto-restock process")
        return JSONResponse(error_body("Server error during auto-restock"), status_code=500)

    return JSONResponse(body, status_code=200 if result.success else 500)
