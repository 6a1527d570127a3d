# app/core/exceptions.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


class PaymentProviderError(Exception):
    """Fallo del proveedor de pagos (transporte o respuesta no exitosa)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse().model_dump())


def setup_exception_handlers(app: FastAPI):
    """Registrar handlers de errores de la aplicación"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(PyMongoError)
    async def database_exception_handler(request: Request, exc: PyMongoError):
        logger.error(f"❌ Error de base de datos en {request.method} {request.url.path}: {exc}", exc_info=exc)
        return _internal_error()

    @app.exception_handler(PaymentProviderError)
    async def payment_exception_handler(request: Request, exc: PaymentProviderError):
        logger.error(f"❌ Error del proveedor de pagos (status={exc.status_code}): {exc}")
        return _internal_error()

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"❌ Error no controlado en {request.method} {request.url.path}")
        return _internal_error()
