from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from siteadmin.api.admin.router import admin_router
from siteadmin.config import APP_VERSION, settings
from siteadmin.core.errors import register_exception_handlers
from siteadmin.core.logging_config import configure_logging
from siteadmin.database import engine
from siteadmin.middleware.prometheus import PrometheusMiddleware
from siteadmin.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

    async with engine.begin() as conn:
        if settings.RESET_DB:
            logger.warning("RESET_DB is set, dropping all admin tables")
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s %s started (%s)", settings.PROJECT_NAME, APP_VERSION, settings.ENVIRONMENT)

    yield

    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs" if settings.is_development else None,
    redoc_url=None,
    openapi_url="/api/openapi.json" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(PrometheusMiddleware)

register_exception_handlers(app)
app.include_router(admin_router, prefix=settings.API_PREFIX)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": APP_VERSION}


@app.get("/metrics", include_in_schema=False)
async def metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
