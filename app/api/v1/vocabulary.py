"""Importación de vocabulario generado por el modelo"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...services.errors import MissingParametersError
from ...services.genai_client import GenerativeClient
from ...services.vocabulary_service import import_vocabulary, parse_amount
from ..models.vocabulary import VocabularyResponse
from .dependencies import get_generative_dependency

router = APIRouter(tags=["Vocabulary"])


def vocabulary_query(
    mode: Optional[str] = Query(None, description="'generate' o 'raw'"),
    knownLanguage: Optional[str] = Query(None, description="Idioma conocido"),
    learnLanguage: Optional[str] = Query(None, description="Idioma a aprender"),
    inputText: Optional[str] = Query(None, description="Tema o texto libre"),
    amount: Optional[str] = Query(None, description="Cantidad de pares (por defecto 10)"),
) -> dict:
    """Valida los parámetros de importación de vocabulario"""
    if not mode or not knownLanguage or not learnLanguage or not inputText:
        raise MissingParametersError("Missing query parameters")
    return {
        "mode": mode,
        "known_language": knownLanguage,
        "learn_language": learnLanguage,
        "input_text": inputText,
        "amount": parse_amount(amount),
    }


@router.api_route(
    "/importVocabulary",
    methods=["GET", "POST"],
    response_model=VocabularyResponse,
    summary="Importar vocabulario",
    description=(
        "Genera pares de vocabulario sobre un tema (mode=generate) o los extrae "
        "de un texto libre (mode=raw)."
    ),
    responses={
        400: {"description": "Faltan parámetros (texto plano)"},
        500: {"description": "Salida del modelo inválida (JSON) o error del proveedor"},
    },
)
async def import_vocabulary_endpoint(
    params: dict = Depends(vocabulary_query),
    client: GenerativeClient = Depends(get_generative_dependency),
):
    words = await import_vocabulary(client, **params)
    return VocabularyResponse(words=words)
