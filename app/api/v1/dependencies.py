"""Dependencias compartidas por los routers: clientes de proveedores externos"""

from ...services.genai_client import GenerativeClient, get_generative_client
from ...services.translation_client import (TranslationClient,
                                            get_translation_client)


async def get_translation_dependency() -> TranslationClient:
    """Dependencia para obtener el cliente de traducción"""
    return get_translation_client()


async def get_generative_dependency() -> GenerativeClient:
    """
    Dependencia para obtener el cliente del modelo generativo

    El ``genai.Client`` subyacente se crea en la primera llamada al modelo,
    así un fallo de inicialización se reporta con el error de cada endpoint
    """
    return get_generative_client()
