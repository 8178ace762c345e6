"""FastAPI entrypoint for the restaurant management API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI

from restoman.api.api import api_router
from restoman.core.config import Settings, settings
from restoman.core.errors import install_error_handlers
from restoman.db.session import Database
from restoman.services.account_service import init_admin_user
from restoman.services.restock_job import RestockJobRunner

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    *,
    restock_runner: Callable[[], Any] | None = None,
) -> FastAPI:
    """Build the application around an explicit settings object.

    The database, schema and restock runner are created here once; request
    handlers reach them through ``app.state``.
    """
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.log_level.upper())

    database = Database(app_settings.database_url)
    if restock_runner is None:
        restock_runner = RestockJobRunner(
            database.session_factory,
            timeout_seconds=app_settings.restock_timeout_seconds,
        )

    app = FastAPI(title=app_settings.app_name)
    app.state.settings = app_settings
    app.state.db = database
    app.state.restock_runner = restock_runner
    install_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    def startup() -> None:
        if not app_settings.cron_secret:
            if app_settings.cron_require_secret:
                logger.warning("CRON_SECRET not set and CRON_REQUIRE_SECRET=1; cron endpoint rejects all requests.")
            else:
                logger.warning("CRON_SECRET not set; cron endpoint accepts unauthenticated requests.")
        database.init_schema()
        with database.session_factory() as session:
            try:
                admin_present = init_admin_user(session, app_settings)
                logger.info("[BOOTSTRAP] admin present before startup: %s", "yes" if admin_present else "no")
            except Exception:
                logger.exception("[BOOTSTRAP] Admin bootstrap failed; continuing startup.")

    @app.on_event("shutdown")
    def shutdown() -> None:
        shutdown_runner = getattr(app.state.restock_runner, "shutdown", None)
        if callable(shutdown_runner):
            shutdown_runner()
        database.dispose()

    return app


app = create_app()
