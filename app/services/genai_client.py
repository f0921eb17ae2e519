"""Cliente para el modelo generativo (Gemini vía google-genai)

Envía un prompt con un esquema de salida declarado y valida que la
respuesta sea JSON utilizable antes de devolverla.
"""

import json
import logging
import time
from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..api.envs import (GEMINI_MODEL, GENERATION_MAX_OUTPUT_TOKENS,
                        GENERATION_TEMPERATURE, GENERATION_TOP_P,
                        GOOGLE_CLOUD_LOCATION, GOOGLE_CLOUD_PROJECT)
from ..utils.logging_config import LoggerMixin
from .errors import (EmptyOutputError, GenerativeServiceError,
                     MalformedOutputError, TokenLimitExceededError)

logger = logging.getLogger(__name__)


class GenerativeClient(LoggerMixin):
    """Envoltorio de ``genai.Client`` con validación de salida JSON"""

    def __init__(
        self,
        client: Optional[genai.Client] = None,
        model: str = GEMINI_MODEL,
        temperature: float = GENERATION_TEMPERATURE,
        top_p: float = GENERATION_TOP_P,
        max_output_tokens: int = GENERATION_MAX_OUTPUT_TOKENS,
    ):
        """
        Inicializa el cliente generativo

        Args:
            client: Cliente de google-genai ya construido (si es None se crea uno
                para Vertex AI en el primer uso)
            model: Nombre del modelo
            temperature: Temperatura de muestreo
            top_p: Nucleus sampling
            max_output_tokens: Máximo de tokens de salida
        """
        self._client = client
        self.model = model
        self.temperature = temperature
        self.top_p = top_p
        self.max_output_tokens = max_output_tokens

        self.log_operation("client_initialized", provider="genai", model=model)

    @property
    def client(self) -> genai.Client:
        """Cliente de google-genai, creado en el primer uso"""
        if self._client is None:
            self._client = genai.Client(
                vertexai=True,
                project=GOOGLE_CLOUD_PROJECT,
                location=GOOGLE_CLOUD_LOCATION,
            )
        return self._client

    async def close(self):
        """Cierra el cliente asíncrono subyacente"""
        if self._client is None:
            return
        aclose = getattr(self._client.aio, "aclose", None)
        if aclose is not None:
            await aclose()
        logger.info("Cliente generativo cerrado")

    def build_config(self, schema: types.Schema) -> types.GenerateContentConfig:
        """Configuración de generación con salida JSON y esquema declarado"""
        return types.GenerateContentConfig(
            temperature=self.temperature,
            top_p=self.top_p,
            max_output_tokens=self.max_output_tokens,
            response_mime_type="application/json",
            response_schema=schema,
        )

    async def generate_json(
        self, prompt: str, schema: types.Schema, operation: str = "generate"
    ) -> Any:
        """
        Genera contenido y devuelve la salida decodificada como JSON

        Args:
            prompt: Prompt en lenguaje natural
            schema: Esquema de salida declarado al modelo
            operation: Nombre de la operación para los logs

        Returns:
            Valor JSON decodificado (lista, dict, ...)

        Raises:
            GenerativeServiceError: Fallo de la API del modelo
            TokenLimitExceededError: El modelo cortó la salida por MAX_TOKENS
            EmptyOutputError: El modelo no devolvió texto
            MalformedOutputError: El texto no es JSON válido
        """
        start_time = time.time()
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=[
                    types.Content(role="user", parts=[types.Part(text=prompt)])
                ],
                config=self.build_config(schema),
            )
        except genai_errors.APIError as e:
            self.log_error(operation, e, provider="genai", status_code=e.code)
            raise GenerativeServiceError(f"Error de la API generativa: {e}") from e

        self.log_performance(
            operation, (time.time() - start_time) * 1000, provider="genai"
        )
        return parse_json_output(response)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity y -Infinity no son JSON válido
    raise ValueError(f"Constante no permitida en JSON: {name}")


def parse_json_output(response: types.GenerateContentResponse) -> Any:
    """
    Valida la respuesta del modelo y decodifica el JSON del primer candidato
    """
    candidates = response.candidates or []
    first = candidates[0] if candidates else None

    if first is not None and first.finish_reason == types.FinishReason.MAX_TOKENS:
        raise TokenLimitExceededError()

    text = None
    if first is not None and first.content and first.content.parts:
        text = first.content.parts[0].text

    if not text:
        raise EmptyOutputError()

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f"Error parseando la respuesta del modelo: {e}", exc_info=True)
        raise MalformedOutputError(str(e)) from e


# Instancia global del cliente
_generative_client: Optional[GenerativeClient] = None


def get_generative_client() -> GenerativeClient:
    """
    Obtiene la instancia global del cliente generativo

    Returns:
        Instancia del cliente generativo
    """
    global _generative_client

    if _generative_client is None:
        _generative_client = GenerativeClient()

    return _generative_client


async def close_generative_client():
    """Cierra la instancia global del cliente generativo"""
    global _generative_client
    if _generative_client:
        await _generative_client.close()
        _generative_client = None
        logger.info("Cliente generativo global cerrado")
