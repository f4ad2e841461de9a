import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventario.config import Settings, get_settings
from inventario.core.errors import register_exception_handlers
from inventario.core.logging import setup_logging
from inventario.database import (
    build_session_factory,
    engine as default_engine,
    ensure_database_dir,
    init_schema,
)
from inventario.routers import (
    dashboard_router,
    health_router,
    products_router,
    purchase_orders_router,
    sales_router,
    suppliers_router,
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, db_engine=None) -> FastAPI:
    """Build the API around one store engine.

    The engine is owned by the app: tables are created at startup and the
    pool is disposed at shutdown. Handlers get sessions through ``get_db``.
    """
    settings = settings or get_settings()
    db_engine = db_engine if db_engine is not None else default_engine

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        ensure_database_dir(db_engine.url)
        init_schema(db_engine)
        logger.info("Store ready (%s backend)", db_engine.url.get_backend_name())
        try:
            yield
        finally:
            db_engine.dispose()
            logger.info("Store connections released")

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.engine = db_engine
    app.state.session_factory = build_session_factory(db_engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list() or ["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(sales_router)
    app.include_router(dashboard_router)
    app.include_router(suppliers_router)
    app.include_router(purchase_orders_router)
    return app


setup_logging()
app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    logger.info("Server listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


__all__ = ["app", "create_app", "run"]


if __name__ == "__main__":
    run()
