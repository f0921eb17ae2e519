"""
Módulo de middleware para la aplicación FastAPI
"""

from .cors import CORSHeadersMiddleware
from .error_handler import ErrorHandlerMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "CORSHeadersMiddleware",
]
