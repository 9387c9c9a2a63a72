"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.catalog_api.api.http.app_data import ApplicationDependencies
from src.catalog_api.api.http.routers import health
from src.catalog_api.api.http.routers.service import product
from src.catalog_api.api.http.schemas import ErrorEnvelope
from src.catalog_api.api.utils.app_startup import configure_logging
from src.catalog_api.core.errors import (
    InvalidProductError,
    ProductNotFoundError,
    StorageError,
)
from src.catalog_api.core.services import DbSessionService
from src.catalog_api.runtime.context import get_config

configure_logging()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


_is_production = get_config().app.environment == "production"

app = FastAPI(
    title="Product Catalog API",
    lifespan=lifespan,
    docs_url=None if _is_production else "/docs",
    redoc_url=None if _is_production else "/redoc",
)

app.add_middleware(SecurityHeadersMiddleware)

__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
if _is_production and "*" in get_config().app.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything logged while handling the request inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content=ErrorEnvelope.build("Internal server error").content(),
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


# --- Error envelopes ---
@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    path_errors = [err for err in errors if err.get("loc", ("",))[0] == "path"]
    if path_errors:
        message = f"Error {path_errors[0]['loc'][-1]} is invalid"
    else:
        message = "Invalid json body"

    logger.bind(
        status_code=400,
        errors=[{"loc": err.get("loc"), "type": err.get("type")} for err in errors],
    ).warning("request.invalid")
    return JSONResponse(status_code=400, content=ErrorEnvelope.build(message).content())


@app.exception_handler(InvalidProductError)
async def invalid_product_handler(
    request: Request, exc: InvalidProductError
) -> JSONResponse:
    logger.bind(status_code=400, fields=exc.fields).warning("product.invalid")
    envelope = ErrorEnvelope.build(exc.message, code=exc.code, fields=exc.fields)
    return JSONResponse(status_code=400, content=envelope.content())


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(
    request: Request, exc: ProductNotFoundError
) -> JSONResponse:
    return JSONResponse(status_code=404, content=ErrorEnvelope.build(str(exc)).content())


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.bind(err=str(exc), error_type=type(exc).__name__).error("storage.error")
    return JSONResponse(
        status_code=500, content=ErrorEnvelope.build("Internal server error").content()
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorEnvelope.build(str(exc.detail)).content(),
        headers=exc.headers,
    )


# --- Router registration ---
app.include_router(health.router)
app.include_router(product.router)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)
    app.state.app_dependencies = ApplicationDependencies(
        database_service=DbSessionService(),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,
    )
