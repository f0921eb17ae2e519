"""Traducción - Proxy hacia Cloud Translation"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...services.errors import MissingParametersError, TranslationServiceError
from ...services.translation_client import TranslationClient
from ...utils.logging_config import get_logger
from ..models.translate import TranslateResponse
from .dependencies import get_translation_dependency

logger = get_logger(__name__)

router = APIRouter(tags=["Translate"])


def translate_query(
    text: Optional[List[str]] = Query(
        None, description="Texto a traducir (se puede repetir)"
    ),
    knownLanguage: Optional[str] = Query(None, description="Idioma de origen"),
    learnLanguage: Optional[str] = Query(None, description="Idioma de destino"),
) -> dict:
    """Valida los parámetros de traducción"""
    texts = [item for item in text or [] if item]
    if not texts or not knownLanguage or not learnLanguage:
        raise MissingParametersError("Missing query parameters")
    return {"texts": texts, "source": knownLanguage, "target": learnLanguage}


@router.get(
    "/translate",
    response_model=TranslateResponse,
    summary="Traducir texto",
    responses={
        400: {"description": "Faltan parámetros (texto plano)"},
        500: {"description": "Error del proveedor de traducción (texto plano)"},
    },
)
async def translate(
    params: dict = Depends(translate_query),
    translator: TranslationClient = Depends(get_translation_dependency),
):
    """
    Traduce ``text`` de ``knownLanguage`` a ``learnLanguage``

    Returns:
        TranslateResponse: Traducciones en el orden de entrada
    """
    try:
        translated = await translator.translate(
            params["texts"], source=params["source"], target=params["target"]
        )
    except TranslationServiceError:
        raise
    except Exception as e:
        logger.error(
            f"Error de traducción: {e}", extra={"endpoint": "translate"}, exc_info=True
        )
        raise TranslationServiceError(str(e)) from e

    logger.info(
        f"Traducción completada: {params['source']} -> {params['target']}",
        extra={"endpoint": "translate"},
    )
    return TranslateResponse(translated=translated)
