"""Cliente HTTP para Google Cloud Translation (API REST v2)"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional, Sequence, Union

import google.auth
import google.auth.credentials
import google.auth.transport.requests
import httpx
from google.auth import exceptions as auth_exceptions

from ..api.envs import (TRANSLATE_API_KEY, TRANSLATE_BASE_URL,
                        TRANSLATE_TIMEOUT_SECONDS)
from ..utils.logging_config import LoggerMixin
from .errors import TranslationServiceError

logger = logging.getLogger(__name__)

TRANSLATE_SCOPES = ["https://www.googleapis.com/auth/cloud-translation"]


class TranslationClient(LoggerMixin):
    """Cliente para comunicación con Cloud Translation"""

    def __init__(
        self,
        api_key: Optional[str] = TRANSLATE_API_KEY,
        base_url: str = TRANSLATE_BASE_URL,
        timeout_seconds: float = TRANSLATE_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        credentials: Optional[google.auth.credentials.Credentials] = None,
    ):
        """
        Inicializa el cliente de traducción

        Args:
            api_key: Clave API de Google Cloud (sin clave se usan las
                credenciales por defecto de la aplicación)
            base_url: Endpoint REST de traducción
            timeout_seconds: Timeout de lectura de cada llamada
            transport: Transporte httpx alternativo (tests)
            credentials: Credenciales de Google ya construidas (si es None y no
                hay clave se obtienen con ``google.auth.default`` en el primer uso)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.credentials = credentials

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds, connect=4.0),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

        self.log_operation("client_initialized", provider="translate")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Cierra el cliente HTTP"""
        await self.client.aclose()
        logger.info("Cliente de traducción cerrado")

    async def _auth_headers(self) -> Dict[str, str]:
        """
        Cabecera Authorization con un token de acceso de las credenciales por defecto

        Raises:
            TranslationServiceError: No hay credenciales o no se pudieron refrescar
        """
        try:
            if self.credentials is None:
                self.credentials, _ = google.auth.default(scopes=TRANSLATE_SCOPES)
            if not self.credentials.valid:
                # refresh() es bloqueante (usa requests)
                await asyncio.to_thread(
                    self.credentials.refresh,
                    google.auth.transport.requests.Request(),
                )
        except auth_exceptions.GoogleAuthError as e:
            self.log_error("translate_auth_error", e, provider="translate")
            raise TranslationServiceError(
                f"No se pudieron obtener credenciales de Google: {e}"
            ) from e

        return {"Authorization": f"Bearer {self.credentials.token}"}

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        """
        Valida la respuesta HTTP y devuelve el cuerpo decodificado

        Raises:
            TranslationServiceError: Estado HTTP de error o cuerpo ilegible
        """
        if response.status_code >= 400:
            error = TranslationServiceError(
                f"Cloud Translation respondió {response.status_code}: {response.text}"
            )
            self.log_error(
                "translate_http_error",
                error,
                provider="translate",
                status_code=response.status_code,
            )
            raise error

        try:
            data = response.json()
        except ValueError as e:
            raise TranslationServiceError(f"Respuesta no es JSON: {e}") from e

        if not isinstance(data, dict):
            raise TranslationServiceError("Respuesta con formato inesperado")
        return data

    async def translate(
        self, text: Union[str, Sequence[str]], source: str, target: str
    ) -> List[str]:
        """
        Traduce uno o varios textos

        Args:
            text: Texto o lista de textos a traducir
            source: Código del idioma de origen
            target: Código del idioma de destino

        Returns:
            Lista de traducciones en el mismo orden que la entrada
        """
        queries = [text] if isinstance(text, str) else list(text)
        if self.api_key:
            params = {"key": self.api_key}
            headers = None
        else:
            params = None
            headers = await self._auth_headers()
        payload = {
            "q": queries,
            "source": source,
            "target": target,
            "format": "text",
        }

        start_time = time.time()
        try:
            response = await self.client.post(
                self.base_url, params=params, headers=headers, json=payload
            )
        except httpx.TimeoutException as e:
            self.log_error("translate_timeout", e, provider="translate")
            raise TranslationServiceError("Timeout al llamar a Cloud Translation") from e
        except httpx.HTTPError as e:
            self.log_error("translate_connection_error", e, provider="translate")
            raise TranslationServiceError(
                f"No se pudo conectar con Cloud Translation: {e}"
            ) from e

        data = self._handle_response(response)
        self.log_performance(
            "translate", (time.time() - start_time) * 1000, provider="translate"
        )

        body = data.get("data")
        translations = body.get("translations") if isinstance(body, dict) else None
        if not isinstance(translations, list) or not all(
            isinstance(item, dict) and "translatedText" in item
            for item in translations
        ):
            raise TranslationServiceError("Respuesta sin 'data.translations'")

        return [str(item["translatedText"]) for item in translations]


# Instancia global del cliente
_translation_client: Optional[TranslationClient] = None


def get_translation_client() -> TranslationClient:
    """
    Obtiene la instancia global del cliente de traducción

    Returns:
        Instancia del cliente de traducción
    """
    global _translation_client

    if _translation_client is None:
        _translation_client = TranslationClient()

    return _translation_client


async def close_translation_client():
    """Cierra la instancia global del cliente de traducción"""
    global _translation_client
    if _translation_client:
        await _translation_client.close()
        _translation_client = None
        logger.info("Cliente de traducción global cerrado")
