"""
api/main.py -- FastAPI application entry point for the Vehicle Registry API.

Run with:  python main.py
           uvicorn asgi:app --reload

Middleware stack (outermost to innermost):
  1. TrustedHostMiddleware -- rejects requests with unexpected Host headers
  2. CORSMiddleware        -- adds CORS headers for allowed browser origins
  3. SlowAPIMiddleware     -- enforces per-route rate limits from api.limiter

Lifespan builds the configuration, stores and token issuer on startup and
disposes the stores on shutdown.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.limiter import limiter
from api.models import ErrorDetail, ErrorResponse, ErrosDeValidacao, HealthResponse, HomeResponse
from api.routes.administrators import router as administrators_router
from api.routes.vehicles import router as vehicles_router
from auth.dependencies import get_current_claims
from auth.models import TokenClaims
from auth.service import AdministratorService
from auth.store import AdministratorStore
from auth.tokens import TokenIssuer
from core.config import get_settings
from core.errors import ApiError, AuthenticationError, ValidationError
from fleet.store import VehicleStore

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("vehicleregistry.api")

_settings = get_settings()

# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application-level resources across the full server lifetime.

    Startup order matters:
      1. Settings -- everything below is built from them.
      2. Stores -- create their tables if missing.
      3. Token issuer -- receives the settings explicitly.
      4. Default administrator -- seeded only into an empty table.
    """
    settings = get_settings()
    app.state.settings = settings
    logger.info("Vehicle Registry API starting up (version %s)", settings.version)

    app.state.admin_store = AdministratorStore(settings.database_url)
    app.state.vehicle_store = VehicleStore(settings.database_url)
    logger.info("Stores initialized")

    app.state.token_issuer = TokenIssuer(settings)
    logger.info("Token issuer initialized (configured=%s)", app.state.token_issuer.configured)

    AdministratorService(app.state.admin_store).ensure_default_administrator(
        settings.default_admin_email, settings.default_admin_password
    )

    yield

    app.state.admin_store.close()
    app.state.vehicle_store.close()
    logger.info("Vehicle Registry API shutdown complete")


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Vehicle Registry API",
    description="Administrators and vehicles with JWT authentication and role-based access.",
    version=_settings.version,
    lifespan=lifespan,
    # Built-in /docs and /redoc are replaced below by token-protected routes.
    docs_url=None,
    redoc_url=None,
)

# ---------------------------------------------------------------------------
# Middleware stack
# ---------------------------------------------------------------------------

app.add_middleware(TrustedHostMiddleware, allowed_hosts=_settings.allowed_hosts)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)

app.add_middleware(SlowAPIMiddleware)

# SlowAPI looks for app.state.limiter by convention.
app.state.limiter = limiter


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Router registration
# ---------------------------------------------------------------------------

app.include_router(administrators_router)
app.include_router(vehicles_router)


# ---------------------------------------------------------------------------
# Home, health and protected documentation
# ---------------------------------------------------------------------------


@app.get("/", response_model=HomeResponse, tags=["Home"])
async def home() -> HomeResponse:
    return HomeResponse(version=_settings.version)


@app.get("/health", response_model=HealthResponse, tags=["Home"])
def health(request: Request) -> HealthResponse:
    """Report liveness plus a database round-trip. No authentication, no rate limit."""
    components = {"app": "ok"}
    try:
        request.app.state.admin_store.ping()
        request.app.state.vehicle_store.ping()
        components["database"] = "ok"
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        components["database"] = "error"
    status = "healthy" if components["database"] == "ok" else "degraded"
    return HealthResponse(status=status, version=_settings.version, components=components)


@app.get("/docs", include_in_schema=False)
async def docs(claims: TokenClaims = Depends(get_current_claims)):
    """Swagger UI -- requires authentication."""
    return get_swagger_ui_html(openapi_url="/openapi.json", title="Vehicle Registry API")


@app.get("/redoc", include_in_schema=False)
async def redoc(claims: TokenClaims = Depends(get_current_claims)):
    """ReDoc UI -- requires authentication."""
    return get_redoc_html(openapi_url="/openapi.json", title="Vehicle Registry API")


# ---------------------------------------------------------------------------
# Exception handlers
#
# Field-rule failures return {"Mensagens": [...]}. Everything else returns the
# same ErrorResponse envelope so clients can parse errors uniformly.
# ---------------------------------------------------------------------------


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Translate the core/errors.py taxonomy into status code and body."""
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=exc.http_status,
            content=ErrosDeValidacao(messages=exc.messages).model_dump(by_alias=True),
        )
    if exc.http_status >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    response = JSONResponse(status_code=exc.http_status, content=exc.to_response())
    if isinstance(exc, AuthenticationError):
        response.headers["WWW-Authenticate"] = "Bearer"
    return response


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 with a structured error when a rate limit is exceeded."""
    retry_after = int(getattr(exc, "retry_after", 60))
    response = JSONResponse(
        status_code=429,
        content=ErrorResponse(
            error=ErrorDetail(
                code="rate_limited",
                message="Too many requests.",
                detail=str(exc),
            )
        ).model_dump(),
    )
    response.headers["Retry-After"] = str(retry_after)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 when the body or query params cannot be parsed at all (e.g. Ano is not a number)."""
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error=ErrorDetail(
                code="validation_error",
                message="Request validation failed.",
                detail=str(exc.errors()),
            )
        ).model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework-raised HTTP errors (unknown path, wrong method) in the envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=ErrorDetail(
                code=f"http_{exc.status_code}",
                message=str(exc.detail),
            )
        ).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected server errors, store failures included.

    The raw exception goes to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorDetail(
                code="internal_error",
                message="An unexpected error occurred.",
            )
        ).model_dump(),
    )
