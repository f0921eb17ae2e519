"""
Middleware para manejo centralizado de errores
"""

import time
import traceback
import uuid
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..services.errors import (MissingParametersError, ModelOutputError,
                               ProviderError)
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware para manejo centralizado de errores"""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Procesa la request y maneja errores de forma centralizada

        Args:
            request: Request HTTP
            call_next: Siguiente middleware/handler

        Returns:
            Response HTTP con manejo de errores
        """
        start_time = time.time()
        request_id = self._generate_request_id()

        request.state.request_id = request_id

        try:
            logger.info(
                f"Request iniciada: {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "query_params": str(request.query_params),
                    "client_ip": request.client.host if request.client else None,
                },
            )

            response = await call_next(request)

            duration_ms = (time.time() - start_time) * 1000

            logger.info(
                f"Request completada: {request.method} {request.url.path} - {response.status_code}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            return response

        except Exception as exc:
            duration_ms = (time.time() - start_time) * 1000

            # Los 400 no son fallos del servidor
            log = logger.warning if isinstance(exc, MissingParametersError) else logger.error
            # Traceback sólo para fallos no previstos
            domain_error = isinstance(
                exc, (MissingParametersError, ModelOutputError, ProviderError)
            )
            log(
                f"Error en request: {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": duration_ms,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                },
                exc_info=not domain_error,
            )

            error_response = self._handle_exception(exc, request_id)
            error_response.headers["X-Request-ID"] = request_id
            error_response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            return error_response

    def _generate_request_id(self) -> str:
        """Genera un ID único para la request"""
        return str(uuid.uuid4())[:8]

    def _handle_exception(self, exc: Exception, request_id: str) -> Response:
        """
        Convierte excepciones en respuestas HTTP apropiadas

        Args:
            exc: Excepción capturada
            request_id: ID de la request

        Returns:
            Response con el error formateado
        """
        # Parámetros faltantes: texto plano
        if isinstance(exc, MissingParametersError):
            return PlainTextResponse(exc.public_message, status_code=exc.status_code)

        # Salida del modelo inválida: JSON {"error": ...}
        elif isinstance(exc, ModelOutputError):
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": exc.public_message},
            )

        # Fallo no controlado del proveedor: texto plano sin detalles internos
        elif isinstance(exc, ProviderError):
            return PlainTextResponse(exc.public_message, status_code=exc.status_code)

        # Error genérico del servidor
        else:
            logger.critical(
                f"Error no manejado: {type(exc).__name__}",
                extra={
                    "request_id": request_id,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                    "traceback": traceback.format_exc(),
                },
            )

            return JSONResponse(
                status_code=500,
                content={
                    "error": "internal_server_error",
                    "message": "Internal server error",
                    "request_id": request_id,
                },
            )
