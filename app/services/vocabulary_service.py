"""Importación de vocabulario: prompt según el modo, llamada al modelo y validación"""

import re
from typing import Any, List, Optional

from ..api.envs import DEFAULT_VOCABULARY_AMOUNT
from ..utils.logging_config import get_logger
from .errors import (GenerativeServiceError, ModelOutputError,
                     SchemaMismatchError, VocabularyGenerationError)
from .genai_client import GenerativeClient
from .prompts import VOCABULARY_SCHEMA, build_vocabulary_prompt

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_amount(raw: Optional[str], default: int = DEFAULT_VOCABULARY_AMOUNT) -> int:
    """Entero inicial de ``raw`` ("12abc" -> 12); ``default`` si no hay ninguno"""
    if not raw:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    return int(match.group(1))


async def import_vocabulary(
    client: GenerativeClient,
    mode: str,
    known_language: str,
    learn_language: str,
    input_text: str,
    amount: int,
) -> List[Any]:
    """
    Genera o extrae pares de vocabulario con el modelo generativo

    Returns:
        La lista decodificada tal como la devolvió el modelo

    Raises:
        ModelOutputError: Salida del modelo cortada, vacía, ilegible o sin forma de lista
        VocabularyGenerationError: Cualquier otro fallo (modo inválido, API del modelo)
    """
    try:
        prompt = build_vocabulary_prompt(
            mode, known_language, learn_language, input_text, amount
        )
        words = await client.generate_json(
            prompt, VOCABULARY_SCHEMA, operation="import_vocabulary"
        )
    except ModelOutputError:
        raise
    except GenerativeServiceError as e:
        # El cliente generativo ya registró el fallo de la API
        raise VocabularyGenerationError(str(e)) from e
    except Exception as e:
        logger.error(
            f"Error generando vocabulario: {e}",
            extra={"mode": mode, "endpoint": "importVocabulary"},
            exc_info=True,
        )
        raise VocabularyGenerationError(str(e)) from e

    if not isinstance(words, list):
        raise SchemaMismatchError(
            "Unexpected model response format (not an array)",
            detail=f"Se esperaba una lista y se recibió {type(words).__name__}",
        )

    logger.info(
        f"Vocabulario importado: {len(words)} pares",
        extra={"mode": mode, "endpoint": "importVocabulary"},
    )
    return words
