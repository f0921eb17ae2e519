"""Información léxica de una palabra (categoría, sinónimos, antónimos, ejemplos)"""

from typing import Any, Dict

from pydantic import ValidationError

from ..api.models.word_info import WordInfo
from ..utils.logging_config import get_logger
from .errors import (GenerativeServiceError, ModelOutputError,
                     SchemaMismatchError, WordInfoError)
from .genai_client import GenerativeClient
from .prompts import WORD_INFO_SCHEMA, build_word_info_prompt

logger = get_logger(__name__)


async def lookup_word_info(
    client: GenerativeClient,
    known_language: str,
    learn_language: str,
    known_word: str,
    learn_word: str,
) -> Dict[str, Any]:
    """
    Consulta al modelo la información de ``learn_word``

    Returns:
        El objeto decodificado tal como lo devolvió el modelo
    """
    try:
        prompt = build_word_info_prompt(
            known_language, learn_language, known_word, learn_word
        )
        info = await client.generate_json(
            prompt, WORD_INFO_SCHEMA, operation="word_info"
        )
    except ModelOutputError:
        raise
    except GenerativeServiceError as e:
        # El cliente generativo ya registró el fallo de la API
        raise WordInfoError(str(e)) from e
    except Exception as e:
        logger.error(
            f"Error obteniendo información de palabra: {e}",
            extra={"endpoint": "wordInfo"},
            exc_info=True,
        )
        raise WordInfoError(str(e)) from e

    if not isinstance(info, dict):
        raise SchemaMismatchError(
            "Unexpected model response format (not an object)",
            detail=f"Se esperaba un objeto y se recibió {type(info).__name__}",
        )

    try:
        WordInfo.model_validate(info)
    except ValidationError as e:
        raise SchemaMismatchError(
            "Unexpected model response format (missing fields)", detail=str(e)
        ) from e

    return info
