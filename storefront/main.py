# storefront/main.py
from __future__ import annotations

import os
import time
import uuid
import logging
from contextlib import asynccontextmanager
from typing import Sequence, cast

from fastapi import FastAPI, Depends, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from starlette.middleware.trustedhost import TrustedHostMiddleware
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.logging import setup_logging
from storefront.core.settings import settings
from storefront.store import CatalogStore, get_store
from storefront.routers.product import router as products_router
from storefront.routers.seller import router as seller_router
from storefront.routers.home import router as home_router

# --- Config din ENV ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
APP_TITLE = os.getenv("APP_TITLE", "storefront-catalog")
ROOT_PATH = (os.getenv("ROOT_PATH", "").strip() or None)
DISABLE_DOCS = os.getenv("DISABLE_DOCS", "").strip().lower() in {"1", "true", "yes", "on"}

# Limitare body (bazată pe Content-Length, non-intruzivă)
try:
    MAX_BODY_SIZE_BYTES = int(os.getenv("MAX_BODY_SIZE_BYTES", "0"))  # 0 = dezactivat
except ValueError:
    MAX_BODY_SIZE_BYTES = 0

APP_STARTED_MONO = time.monotonic()
APP_STARTED_TS = int(time.time())

# --- Logging ---
setup_logging(LOG_LEVEL)
logger = logging.getLogger("storefront")

tags_metadata = [
    {"name": "health", "description": "Liveness checks"},
    {"name": "products", "description": "Catalog CRUD & search"},
    {"name": "seller", "description": "Seller dashboard (form payloads)"},
    {"name": "storefront", "description": "Home page composition"},
]


def _get_req_id_from_headers(request: Request) -> str:
    # Prefer X-Request-ID, apoi X-Correlation-ID; dacă lipsesc, generează unul.
    return (
        request.headers.get("x-request-id")
        or request.headers.get("x-correlation-id")
        or uuid.uuid4().hex[:12]
    )


# --- Middleware func (registered after app is created) ---
async def request_context_mw(request: Request, call_next):
    """
    - Generează/propagă X-Request-ID
    - Aplică headers de securitate
    - Limitează mărimea corpului când Content-Length e disponibil
    - Server-Timing / X-Process-Time
    """
    req_id = _get_req_id_from_headers(request)

    if MAX_BODY_SIZE_BYTES > 0:
        cl = request.headers.get("content-length")
        if cl is not None and cl.isdigit() and int(cl) > MAX_BODY_SIZE_BYTES:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"detail": "Payload too large", "max_bytes": MAX_BODY_SIZE_BYTES},
                headers={"X-Request-ID": req_id},
            )

    start = time.perf_counter()
    response: Response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000

    response.headers.setdefault("X-Request-ID", req_id)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    response.headers.setdefault("Cache-Control", "no-store")
    response.headers.setdefault("X-App-Version", APP_VERSION)
    response.headers.setdefault("Server-Timing", f"app;dur={duration_ms:.1f}")
    response.headers.setdefault("X-Process-Time", f"{duration_ms:.1f}ms")
    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: store-ul se construiește o singură dată, din seed
    seed_path = settings.seed_path
    app.state.store = CatalogStore.from_seed_file(seed_path)
    logger.info(
        "Catalog seeded with %d products from %s (env=%s, latency_scale=%s)",
        len(app.state.store), seed_path, settings.APP_ENV, settings.CATALOG_LATENCY_SCALE,
    )

    yield

    logger.info("Shutting down; catalog held %d products", len(app.state.store))


# --- App factory (create app BEFORE registering middleware) ---
app = FastAPI(
    title=APP_TITLE,
    version=APP_VERSION,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    root_path=ROOT_PATH or "",
    docs_url=None if DISABLE_DOCS else "/docs",
    redoc_url=None if DISABLE_DOCS else "/redoc",
    openapi_url=None if DISABLE_DOCS else "/openapi.json",
)

app.middleware("http")(request_context_mw)
app.add_middleware(GZipMiddleware, minimum_size=1024)

# Trusted hosts (opțional): TRUSTED_HOSTS="localhost,127.0.0.1,.example.com"
_trusted = [h.strip() for h in os.getenv("TRUSTED_HOSTS", "").split(",") if h.strip()]
if _trusted:
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=cast(Sequence[str], _trusted))  # type: ignore[arg-type]

# CORS din env: CORS_ORIGINS="http://localhost:5173,https://shop.example.com"
_cors = os.getenv("CORS_ORIGINS")
if _cors:
    origins = [o.strip() for o in _cors.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Total-Count",
            "X-Request-ID",
            "Server-Timing",
            "X-Process-Time",
            "X-App-Version",
        ],
    )


def _jsonable_errors(errors):
    # ctx poate conține excepții (ValueError din validatori) -> le facem text
    out = []
    for err in errors:
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        err.pop("url", None)
        out.append(err)
    return jsonable_encoder(out)


# --- Exception handlers (ops-friendly) ---
@app.exception_handler(RequestValidationError)
async def _validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": _jsonable_errors(exc.errors())},
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


# Merge-ul din update revalidează înregistrarea (ex. name=null explicit)
@app.exception_handler(ValidationError)
async def _model_validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": _jsonable_errors(exc.errors())},
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


# Prinde 404/405 Starlette și răspunde JSON unitar
@app.exception_handler(StarletteHTTPException)
async def _starlette_http_exc_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})
    headers.setdefault("X-Request-ID", _get_req_id_from_headers(request))
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
        detail = {"message": "Not Found", "path": str(request.url.path)}
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        detail = {"message": "Method Not Allowed", "path": str(request.url.path)}
    return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=headers)


@app.exception_handler(HTTPException)
async def _http_exc_handler(request: Request, exc: HTTPException):
    headers = dict(exc.headers or {})
    headers.setdefault("X-Request-ID", _get_req_id_from_headers(request))
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


# --- Routes: health ---
@app.get("/", tags=["health"])
def root():
    return {"name": APP_TITLE, "version": APP_VERSION}


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


@app.get("/health/uptime", tags=["health"])
def health_uptime():
    return {"uptime_seconds": round(time.monotonic() - APP_STARTED_MONO, 3), "started_at": APP_STARTED_TS}


@app.get("/health/catalog", tags=["health"])
def health_catalog(store: CatalogStore = Depends(get_store)):
    return {"status": "ok", "products": len(store), "next_id": store.next_id()}


# --- Routers ---
app.include_router(products_router)
app.include_router(seller_router)
app.include_router(home_router)
