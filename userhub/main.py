from contextlib import asynccontextmanager

from fastapi import FastAPI

from userhub.api.routes import health, users
from userhub.core.config import settings
from userhub.core.logging import get_logger
from userhub.services.aggregation_service import get_aggregation_service


log = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"Starting application in {settings.ENV.upper()} mode")
    if settings.is_production:
        log.info("Production mode: Debug disabled, docs disabled, stricter logging")
    else:
        log.info("Development mode: Debug enabled, docs available")

    # Publish an initial result so readers never see an unloaded store
    result = get_aggregation_service().load()
    log.info(f"Initial aggregation: {result.success_count} users, {result.error_count} errors")

    yield

    log.info("Application shutdown complete")


app = FastAPI(
    title="UserHub",
    description="Unified user directory built from heterogeneous user sources",
    version="1.0.0",
    lifespan=lifespan,
    # Disable docs in production
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    debug=settings.debug_enabled,
)


app.include_router(health.router)
app.include_router(users.router)
