import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from .db import create_db_and_tables, engine
from .services.catalog import ASSET_DETAILS
from .services.introspection import SchemaIntrospector
from .routers.allotment import router as allotment_router
from .routers.indents import router as indents_extra_router
from .routers.reports import router as reports_router
from .routers.resources import indents_router, resource_routers

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_cors_origins():
    """Get CORS origins from environment; allow any origin when unset"""
    origins_env = os.getenv("CORS_ORIGINS", "")
    if origins_env:
        return [o.strip() for o in origins_env.split(",") if o.strip()]
    return ["*"]


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="IT Portal",
        description="IT asset management: indents, assets, scrap, stock, invoices, email IDs, costs, renewals and allotments",
        version="1.0.0"
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Fixed sub-paths first, then the generic /{key} routes
    app.include_router(indents_extra_router)
    app.include_router(indents_router)
    for router in resource_routers:
        app.include_router(router)
    app.include_router(allotment_router)
    app.include_router(reports_router)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        message = str(getattr(exc, "orig", None) or exc)
        return JSONResponse(status_code=500, content={"error": message})

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "IT Portal server running"

    @app.on_event("startup")
    def on_startup():
        logger.info("Creating database tables at startup...")
        create_db_and_tables()
        # Reflect the asset table once so writes don't hit the catalog
        introspector = SchemaIntrospector(engine)
        introspector.table(ASSET_DETAILS.table_name)
        introspector.column_types(ASSET_DETAILS.table_name)
        logger.info("Database ready.")

    return app


app = create_app()
