"""
Tests para el endpoint de traducción
"""

import pytest
from fastapi.testclient import TestClient

from app.services.errors import TranslationServiceError


class TestTranslate:
    """Tests para GET /translate"""

    def test_translate_success(self, client: TestClient, mock_translation_client):
        """Test de traducción exitosa"""
        response = client.get(
            "/translate",
            params={"text": "hello", "knownLanguage": "en", "learnLanguage": "es"},
        )

        assert response.status_code == 200
        assert response.json() == {"translated": ["hola"]}
        mock_translation_client.translate.assert_awaited_once_with(
            ["hello"], source="en", target="es"
        )

    def test_translate_repeated_text_keeps_order(
        self, client: TestClient, mock_translation_client
    ):
        """Varios parámetros text se traducen en el mismo orden"""
        mock_translation_client.translate.return_value = ["perro", "gato"]

        response = client.get(
            "/translate?text=dog&text=cat&knownLanguage=en&learnLanguage=es"
        )

        assert response.status_code == 200
        assert response.json()["translated"] == ["perro", "gato"]
        args, _ = mock_translation_client.translate.call_args
        assert args[0] == ["dog", "cat"]

    @pytest.mark.parametrize(
        "params",
        [
            {"knownLanguage": "en", "learnLanguage": "es"},
            {"text": "hello", "learnLanguage": "es"},
            {"text": "hello", "knownLanguage": "en"},
            {"text": "", "knownLanguage": "en", "learnLanguage": "es"},
            {},
        ],
    )
    def test_translate_missing_params(
        self, client: TestClient, mock_translation_client, params
    ):
        """Test de parámetros faltantes"""
        response = client.get("/translate", params=params)

        assert response.status_code == 400
        assert response.text == "Missing query parameters"
        mock_translation_client.translate.assert_not_awaited()

    def test_translate_unexpected_error(
        self, client: TestClient, mock_translation_client
    ):
        """Excepciones inesperadas del cliente también son un error de traducción"""
        mock_translation_client.translate.side_effect = KeyError("data")

        response = client.get(
            "/translate",
            params={"text": "hello", "knownLanguage": "en", "learnLanguage": "es"},
        )

        assert response.status_code == 500
        assert response.text == "Translation error"

    def test_translate_provider_error(
        self, client: TestClient, mock_translation_client
    ):
        """Un fallo del proveedor se responde con 500 en texto plano"""
        mock_translation_client.translate.side_effect = TranslationServiceError(
            "quota exceeded"
        )

        response = client.get(
            "/translate",
            params={"text": "hello", "knownLanguage": "en", "learnLanguage": "es"},
        )

        assert response.status_code == 500
        assert response.text == "Translation error"
        assert "quota" not in response.text
