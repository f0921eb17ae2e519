"""
Modelos Pydantic para el router de información de palabras
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class WordInfoRequest(BaseModel):
    """Cuerpo de la request de wordInfo, ya validado por el router"""

    knownLanguage: str
    learnLanguage: str
    knownWord: str
    learnWord: str


class WordExample(BaseModel):
    """Frase de ejemplo con su traducción"""

    sentence: StrictStr
    translation: StrictStr


class WordInfo(BaseModel):
    """Información léxica devuelta por el modelo"""

    model_config = ConfigDict(populate_by_name=True)

    part_of_speech: StrictStr = Field(..., alias="partOfSpeech")
    synonyms: List[StrictStr]
    antonyms: List[StrictStr]
    examples: List[WordExample]
