"""
Configuración global de pytest y fixtures compartidos
"""

import os
import sys
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient
from google.genai import types

# Cargar variables de entorno de test antes de importar la app
test_env_path = os.path.join(os.path.dirname(__file__), ".env.test")
load_dotenv(test_env_path, override=True)

# Agregar el directorio padre al path para importar la app
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.api.v1.dependencies import (get_generative_dependency,  # noqa: E402
                                     get_translation_dependency)
from app.main import app  # noqa: E402
from app.services.genai_client import GenerativeClient  # noqa: E402


def make_genai_response(
    text=None, finish_reason=types.FinishReason.STOP
) -> types.GenerateContentResponse:
    """Construye una respuesta real de google-genai con un único candidato"""
    parts = [types.Part(text=text)] if text is not None else []
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=parts),
                finish_reason=finish_reason,
            )
        ]
    )


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Cliente de prueba para FastAPI"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_dependency_overrides():
    """Limpia los overrides de dependencias entre tests"""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def genai_response():
    """Factory de respuestas de google-genai"""
    return make_genai_response


@pytest.fixture
def mock_translation_client():
    """Cliente de traducción simulado inyectado en la app"""
    mock = MagicMock()
    mock.translate = AsyncMock(return_value=["hola"])
    app.dependency_overrides[get_translation_dependency] = lambda: mock
    return mock


@pytest.fixture
def mock_genai():
    """``genai.Client`` simulado; ``generate_content`` devuelve un array vacío"""
    mock = MagicMock()
    mock.aio.models.generate_content = AsyncMock(
        return_value=make_genai_response("[]")
    )
    return mock


@pytest.fixture
def generative_client(mock_genai):
    """GenerativeClient real sobre el genai simulado, inyectado en la app"""
    gen_client = GenerativeClient(client=mock_genai, model="gemini-test")
    app.dependency_overrides[get_generative_dependency] = lambda: gen_client
    return gen_client
