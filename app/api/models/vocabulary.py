"""
Modelos Pydantic para el router de importación de vocabulario
"""

from typing import Any, List

from pydantic import BaseModel, Field


class VocabularyResponse(BaseModel):
    """Respuesta de importación de vocabulario

    ``words`` se devuelve tal como lo entregó el modelo: una lista de
    objetos ``{"from": ..., "to": ...}``.
    """

    words: List[Any] = Field(..., description="Lista de pares {from, to}")
