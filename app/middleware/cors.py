"""Middleware de CORS: cabeceras en todas las respuestas y preflight OPTIONS"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..api.envs import CORS_ALLOW_ORIGIN


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Agrega las cabeceras CORS a todas las respuestas y responde cualquier
    request OPTIONS con 204 y cuerpo vacío, sin pasar por el router
    """

    def __init__(self, app: ASGIApp, allow_origin: str = CORS_ALLOW_ORIGIN):
        super().__init__(app)
        self.cors_headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Procesa la request y agrega cabeceras CORS a la response

        Args:
            request: La request HTTP entrante
            call_next: La siguiente función en la cadena de middleware

        Returns:
            Response: La response con cabeceras CORS
        """
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)

        self._add_cors_headers(response)
        return response

    def _add_cors_headers(self, response: Response) -> None:
        for header_name, header_value in self.cors_headers.items():
            response.headers[header_name] = header_value
