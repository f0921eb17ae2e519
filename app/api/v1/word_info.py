"""Información léxica de una palabra"""

from fastapi import APIRouter, Depends, Request

from ...services.errors import MissingParametersError
from ...services.genai_client import GenerativeClient
from ...services.word_info_service import lookup_word_info
from ..models.word_info import WordInfoRequest
from .dependencies import get_generative_dependency

router = APIRouter(tags=["Word info"])

REQUIRED_FIELDS = ("knownLanguage", "learnLanguage", "knownWord", "learnWord")


async def word_info_body(request: Request) -> WordInfoRequest:
    """
    Valida el cuerpo de wordInfo

    Cualquier cuerpo que no sea un objeto JSON con los cuatro campos como
    strings no vacíos se trata como parámetros faltantes (400)
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict) or not all(
        isinstance(payload.get(field), str) and payload[field]
        for field in REQUIRED_FIELDS
    ):
        raise MissingParametersError("Missing body parameters")

    return WordInfoRequest(**{field: payload[field] for field in REQUIRED_FIELDS})


@router.post(
    "/wordInfo",
    summary="Información de una palabra",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": WordInfoRequest.model_json_schema()}
            },
        }
    },
    responses={
        200: {"description": "{partOfSpeech, synonyms, antonyms, examples}"},
        400: {"description": "Faltan parámetros (texto plano)"},
        500: {"description": "Salida del modelo inválida (JSON) o error del proveedor"},
    },
)
async def word_info(
    body: WordInfoRequest = Depends(word_info_body),
    client: GenerativeClient = Depends(get_generative_dependency),
):
    """
    Devuelve categoría gramatical, sinónimos, antónimos y ejemplos de ``learnWord``
    """
    return await lookup_word_info(
        client,
        known_language=body.knownLanguage,
        learn_language=body.learnLanguage,
        known_word=body.knownWord,
        learn_word=body.learnWord,
    )
