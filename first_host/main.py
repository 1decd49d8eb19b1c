"""FastAPI application for the first host address resolver.

Runs directly on Uvicorn (ASGI server).

Environment Variables:
    AUTH_METHOD: Authentication method (none, api_key)
    API_KEYS: Comma-separated list of valid API keys (AUTH_METHOD=api_key)
    CORS_ORIGINS: Comma-separated list of allowed CORS origins
                  If not set, localhost development origins are allowed
    LOG_LEVEL: Root log level (default: INFO)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .auth import validate_api_key
from .config import (
    AuthMethod,
    get_api_keys,
    get_auth_method,
    get_cors_origins,
    validate_configuration,
)
from .logging_config import setup_logging
from .resolver import AddressResolver
from .routers import addresses, health

validate_configuration()
setup_logging()

logger = logging.getLogger(__name__)

# Endpoints that never require authentication
PUBLIC_PATHS = [
    "/",
    "/api/v1/health",
    "/api/v1/health/ready",
    "/api/v1/health/live",
    "/api/v1/docs",
    "/api/v1/redoc",
    "/api/v1/openapi.json",
]

app = FastAPI(
    title="First Host Address API",
    description="First usable host of an IPv4 subnet and its IPv4-mapped IPv6 address",
    version="1.0.0",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
)

# One resolver per process, shared by all requests
app.state.resolver = AddressResolver(logging.getLogger("first_host.resolver"))

cors_origins = get_cors_origins()
logger.info(f"CORS: Allowed origins: {', '.join(cors_origins)}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(addresses.router)


@app.middleware("http")
async def auth_middleware(request: Request, call_next):
    """Handle authentication based on AUTH_METHOD."""
    if request.url.path in PUBLIC_PATHS:
        return await call_next(request)

    if get_auth_method() == AuthMethod.API_KEY:
        api_key = request.headers.get("X-API-Key")
        if not validate_api_key(api_key, get_api_keys()):
            logger.warning(
                "Rejected request with invalid or missing API key",
                extra={
                    "path": request.url.path,
                    "client_host": request.client.host if request.client else "unknown",
                },
            )
            return JSONResponse(status_code=401, content={"detail": "Invalid or missing API key"})

    return await call_next(request)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "First Host Address API",
        "version": "1.0.0",
        "docs": "/api/v1/docs",
        "openapi": "/api/v1/openapi.json",
        "health": "/api/v1/health",
    }
