"""
Modelos Pydantic para el router de traducción
"""

from typing import List

from pydantic import BaseModel, Field


class TranslateResponse(BaseModel):
    """Traducciones en el mismo orden que los textos de entrada"""

    translated: List[str] = Field(..., description="Textos traducidos")
