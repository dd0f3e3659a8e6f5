# itemboard/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse

from itemboard.api.items import GENERIC_ERROR, router as items_router
from itemboard.config import Settings
from itemboard.db.store import ItemStore
from itemboard.exceptions import StoreError
from itemboard.logging_config import setup_logging

logger = logging.getLogger(__name__)

INDEX_PAGE = Path(__file__).resolve().parent / "static" / "index.html"


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ItemStore] = None,
) -> FastAPI:
    """
    Build the API. When ``store`` is omitted one is created from
    ``settings.database_url`` at startup and disposed at shutdown; a store
    passed in stays owned by the caller.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = store is None
        app.state.store = store or ItemStore.from_url(settings.database_url, echo=settings.sql_echo)
        try:
            app.state.store.init_schema()
            logger.info("Item store ready")
        except StoreError:
            # keep serving; requests will answer 500 until the store is back
            logger.exception("Could not initialise item store")
        try:
            yield
        finally:
            if owned:
                app.state.store.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=GENERIC_ERROR)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    def index_page():
        return FileResponse(INDEX_PAGE, media_type="text/html")

    app.include_router(items_router)

    return app


app = create_app()
