import asyncio
import logging
from contextlib import asynccontextmanager

import sentry_sdk
from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sqlalchemy.exc import SQLAlchemyError

from eventia.admin.routers import router as admin_router
from eventia.auth.routers import router as auth_router
from eventia.cart.routers import router as cart_router
from eventia.catalog.routers import router as catalog_router
from eventia.config.logging import setup_logging
from eventia.config.settings import settings
from eventia.errors import EventiaError, ValidationError
from eventia.moderation.routers import router as moderation_router
from eventia.routers.healthz.router import router as healthz_router

setup_logging()
logger = logging.getLogger(__name__)


async def run_migrations():
    alembic_cfg = Config("alembic.ini")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        await run_migrations()
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Eventia API",
    description="Event planning marketplace: catalog, carts, bookings and moderation",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EventiaError)
async def eventia_error_handler(request: Request, exc: EventiaError) -> JSONResponse:
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError):
        content["field"] = exc.field
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error", "code": "internal_error"})


# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(auth_router, tags=["Auth"])
app.include_router(catalog_router, tags=["Catalog"])
app.include_router(cart_router, tags=["Cart"])
app.include_router(admin_router, tags=["Admin"])
app.include_router(moderation_router, tags=["Moderation"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Eventia API"}
