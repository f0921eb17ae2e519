"""
Módulo de configuración de variables de entorno.
Exporta todas las variables de entorno validadas como constantes.
"""

from .env import (  # Instancia de configuración; Variables de la aplicación; Variables de Gemini; Variables de Translation
    API_PORT, CORS_ALLOW_ORIGIN, DEBUG, DEFAULT_VOCABULARY_AMOUNT,
    GEMINI_MODEL, GENERATION_MAX_OUTPUT_TOKENS, GENERATION_TEMPERATURE,
    GENERATION_TOP_P, GOOGLE_CLOUD_LOCATION, GOOGLE_CLOUD_PROJECT, HOST,
    LOG_FILE, LOG_LEVEL, SERVICE_NAME, TRANSLATE_API_KEY, TRANSLATE_BASE_URL,
    TRANSLATE_TIMEOUT_SECONDS, settings)

__all__ = [
    "settings",
    # Variables de la aplicación
    "DEBUG",
    "HOST",
    "API_PORT",
    "SERVICE_NAME",
    "LOG_LEVEL",
    "LOG_FILE",
    "CORS_ALLOW_ORIGIN",
    # Variables de Gemini
    "GOOGLE_CLOUD_PROJECT",
    "GOOGLE_CLOUD_LOCATION",
    "GEMINI_MODEL",
    "GENERATION_TEMPERATURE",
    "GENERATION_TOP_P",
    "GENERATION_MAX_OUTPUT_TOKENS",
    "DEFAULT_VOCABULARY_AMOUNT",
    # Variables de Cloud Translation
    "TRANSLATE_API_KEY",
    "TRANSLATE_BASE_URL",
    "TRANSLATE_TIMEOUT_SECONDS",
]
