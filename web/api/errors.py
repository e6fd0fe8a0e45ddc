"""Centralized FastAPI error handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import ChainCacheError
from rpc_client import RpcError, RpcInvalidParamsError, RpcNotFoundError
from settings import IS_PRODUCTION


def error_body(message: str, details: str | None = None) -> dict:
    body = {"status": "error", "message": message}
    if details is not None:
        body["details"] = details
    return body


def rpc_status(exc: RpcError) -> int:
    """HTTP status an upstream RPC failure surfaces as."""
    if isinstance(exc, RpcInvalidParamsError):
        return 400
    if isinstance(exc, RpcNotFoundError):
        return 404
    return 502


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(ChainCacheError)
    async def handle_chain_cache_error(_request: Request, exc: ChainCacheError):
        return JSONResponse(error_body(exc.message, exc.details), status_code=exc.status_code)

    @app.exception_handler(RpcError)
    async def handle_rpc_error(request: Request, exc: RpcError):
        status = rpc_status(exc)
        logger.warning("RPC error on {} ({}): {}", request.url.path, exc.method, exc.message)
        return JSONResponse(error_body("Upstream RPC request failed", exc.message), status_code=status)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return JSONResponse(error_body("Invalid request", details), status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException):
        message = "Not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(error_body(message), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error on {}: {}", request.url.path, exc)
        details = None if IS_PRODUCTION else str(exc)
        return JSONResponse(error_body("Internal server error", details), status_code=500)
