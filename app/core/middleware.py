# app/core/middleware.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from app.config.settings import settings

logger = logging.getLogger(__name__)

def setup_middleware(app: FastAPI):
    """Configurar CORS y el log de peticiones"""

    # Auth va por header Bearer, sin cookies; con "*" no se permiten credenciales
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{elapsed_ms:.1f}ms"

        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"🌐 {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )

        return response
