"""
Tests para el cliente de Cloud Translation
"""

import asyncio
import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
from google.auth import exceptions as auth_exceptions

from app.services.errors import TranslationServiceError
from app.services.translation_client import TranslationClient

BASE_URL = "https://translation.test/language/translate/v2"


def _run_translate(handler, text="hello", api_key="test-key", credentials=None):
    async def _go():
        async with TranslationClient(
            api_key=api_key,
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            credentials=credentials,
        ) as translator:
            return await translator.translate(text, source="en", target="es")

    return asyncio.run(_go())


class TestTranslationClient:
    """Tests del cliente HTTP de traducción"""

    def test_translate_builds_request(self):
        """La request lleva la clave, los idiomas y el texto"""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"data": {"translations": [{"translatedText": "hola"}]}}
            )

        result = _run_translate(handler)

        assert result == ["hola"]
        assert seen["url"].params["key"] == "test-key"
        assert seen["body"] == {
            "q": ["hello"],
            "source": "en",
            "target": "es",
            "format": "text",
        }

    def test_translate_without_api_key(self):
        """Sin clave se autentica con un token Bearer de las credenciales"""
        seen = {}
        credentials = MagicMock(valid=True, token="adc-token")

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(
                200, json={"data": {"translations": [{"translatedText": "hola"}]}}
            )

        _run_translate(handler, api_key=None, credentials=credentials)

        assert "key" not in seen["url"].params
        assert seen["auth"] == "Bearer adc-token"
        credentials.refresh.assert_not_called()

    def test_translate_refreshes_expired_credentials(self):
        """Credenciales sin token válido se refrescan antes de llamar"""
        seen = {}
        credentials = MagicMock(valid=False, token="old")

        def refresh(request):
            credentials.token = "fresh-token"

        credentials.refresh.side_effect = refresh

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(
                200, json={"data": {"translations": [{"translatedText": "hola"}]}}
            )

        _run_translate(handler, api_key=None, credentials=credentials)

        credentials.refresh.assert_called_once()
        assert seen["auth"] == "Bearer fresh-token"

    def test_translate_default_credentials_lookup(self):
        """Sin clave ni credenciales se usan las credenciales por defecto"""
        credentials = MagicMock(valid=True, token="adc-token")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"data": {"translations": [{"translatedText": "hola"}]}}
            )

        with patch(
            "app.services.translation_client.google.auth.default",
            return_value=(credentials, "test-project"),
        ) as default:
            assert _run_translate(handler, api_key=None) == ["hola"]

        default.assert_called_once()

    def test_translate_without_credentials(self):
        """Sin clave ni credenciales disponibles se lanza TranslationServiceError"""
        handler = MagicMock()

        with patch(
            "app.services.translation_client.google.auth.default",
            side_effect=auth_exceptions.DefaultCredentialsError("no adc"),
        ):
            with pytest.raises(TranslationServiceError):
                _run_translate(handler, api_key=None)

        handler.assert_not_called()

    def test_translate_multiple_texts(self):
        """Varias entradas devuelven varias traducciones en orden"""

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(
                200,
                json={
                    "data": {
                        "translations": [
                            {"translatedText": q.upper()} for q in body["q"]
                        ]
                    }
                },
            )

        assert _run_translate(handler, text=["uno", "dos"]) == ["UNO", "DOS"]

    def test_translate_http_error(self):
        """Un estado HTTP de error se convierte en TranslationServiceError"""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"error": {"message": "forbidden"}})

        with pytest.raises(TranslationServiceError):
            _run_translate(handler)

    def test_translate_connection_error(self):
        """Un error de conexión se convierte en TranslationServiceError"""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TranslationServiceError):
            _run_translate(handler)

    @pytest.mark.parametrize(
        "body",
        [
            {"data": {}},
            {"data": {"translations": [{"text": "hola"}]}},
            {"data": []},
            ["hola"],
        ],
    )
    def test_translate_unexpected_body(self, body):
        """Cuerpos sin data.translations[*].translatedText son un error"""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(TranslationServiceError):
            _run_translate(handler)
