"""
GigSmart API - Main application entry point.

Job marketplace backend: companies post job requests, an admin reviews them.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.exceptions import (
    AppException,
    StoreException,
    UnauthorizedException,
    ValidationException,
)
from app.core.logging_config import configure_logging
from app.admin.views import router as admin_router
from app.job_requests.service import NAMESPACE as JOB_REQUESTS_NAMESPACE, format_timestamp
from app.job_requests.views import router as job_requests_router
from app.kv_store.dependencies import close_kv_store, get_kv_store, open_kv_store
from app.kv_store.store import KVStore

configure_logging()
logger = logging.getLogger(__name__)

settings = get_settings()
API_PREFIX = settings.API_PREFIX.rstrip("/")


def _timestamp() -> str:
    return format_timestamp(datetime.now(timezone.utc))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    logger.info(f"{settings.APP_NAME} starting (kv backend: {settings.KV_BACKEND})")
    app.state.kv_store = await open_kv_store()
    yield
    # Shutdown
    await close_kv_store(app.state.kv_store)
    app.state.kv_store = None


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## GigSmart API

Backend for a short-term job marketplace.

- **Job requests**: companies submit requests, which start as `pending`
- **Review**: admins move requests between `pending`, `active`, `rejected` and `completed`
- **Admin**: login stub and demo dashboards
    """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Admin-Token"],
)


# ==================== Probes ====================


@app.get(f"{API_PREFIX}/ping", tags=["Health"])
async def ping():
    return {"message": "pong", "timestamp": _timestamp(), "server": settings.APP_NAME}


@app.get(f"{API_PREFIX}/health", tags=["Health"])
async def health_check(store: KVStore = Depends(get_kv_store)):
    """Report whether the key-value store answers."""
    body = {
        "status": "ok",
        "timestamp": _timestamp(),
        "server": f"{settings.APP_NAME} v{settings.APP_VERSION}",
        "environment": settings.ENVIRONMENT,
        "env": {
            "kvBackend": settings.KV_BACKEND,
            "hasMongoUri": bool(settings.MONGO_URI),
            "database": settings.MONGO_DB_NAME,
        },
        "store": {"status": "connected", "error": None},
    }
    try:
        await store.ping()
    except StoreException as e:
        logger.error(f"Health check failed: {e.detail}")
        body["status"] = "error"
        body["store"] = {"status": "error", "error": e.detail}
        return JSONResponse(body, status_code=500)
    return body


@app.get(f"{API_PREFIX}/test/db", tags=["Health"])
async def test_db(store: KVStore = Depends(get_kv_store)):
    """Probe the store itself and the job request namespace."""
    tests = {}

    try:
        await store.ping()
        total = await store.count_by_prefix("")
        tests["kvStore"] = {"accessible": True, "error": None, "rowCount": total}
    except StoreException as e:
        tests["kvStore"] = {"accessible": False, "error": e.detail, "rowCount": 0}

    try:
        rows = await store.count_by_prefix(JOB_REQUESTS_NAMESPACE)
        tests["jobRequests"] = {"accessible": True, "error": None, "rowCount": rows}
    except StoreException as e:
        tests["jobRequests"] = {"accessible": False, "error": e.detail, "rowCount": 0}

    return {"success": True, "tests": tests, "timestamp": _timestamp()}


# Include routers
routers = [
    admin_router,
    job_requests_router,
]

for router in routers:
    app.include_router(router, prefix=API_PREFIX)


# ==================== Error envelopes ====================

HTTP_METHODS = {"get", "post", "put", "patch", "delete", "head", "options"}


def available_endpoints() -> list:
    """Every documented route as "METHOD /path", taken from the OpenAPI schema."""
    endpoints = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in operations:
            if method not in HTTP_METHODS:
                continue
            endpoints.append(f"{method.upper()} {path}")
    return endpoints


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    body = {"success": False, "error": exc.detail}
    if isinstance(exc, ValidationException) and exc.received is not None:
        body["received"] = exc.received
    if isinstance(exc, UnauthorizedException):
        # Admin clients read the reason from "message".
        body["message"] = exc.detail
    if isinstance(exc, StoreException):
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
        body["timestamp"] = _timestamp()
    return JSONResponse(body, status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"success": False, "error": "Invalid request body", "received": jsonable_encoder(exc.body)},
        status_code=400,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        logger.info(f"404 Not Found: {request.url.path}")
        return JSONResponse(
            {
                "error": "Endpoint not found",
                "path": request.url.path,
                "availableEndpoints": available_endpoints(),
            },
            status_code=404,
        )
    return JSONResponse({"success": False, "error": exc.detail}, status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Server error on {request.method} {request.url.path}")
    return JSONResponse(
        {"error": "Internal server error", "message": str(exc), "timestamp": _timestamp()},
        status_code=500,
    )
