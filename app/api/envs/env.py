"""
Configuración centralizada de variables de entorno usando Pydantic.
Este módulo proporciona validación de tipos y valores por defecto para todas las variables de entorno.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración de la aplicación con validación de tipos usando Pydantic.

    Las variables de entorno se cargan automáticamente y se validan según los tipos definidos.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Configuración de la aplicación
    debug: bool = Field(default=False, description="Modo debug de la aplicación")

    host: str = Field(
        default="0.0.0.0", description="Host donde se ejecutará la aplicación"
    )

    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Puerto donde se ejecutará la aplicación",
    )

    service_name: str = Field(
        default="vocabulary-api", description="Nombre reportado por el health check"
    )

    # Configuración de logging
    log_level: Optional[str] = Field(
        default=None, description="Nivel de logging (por defecto según DEBUG)"
    )

    log_file: Optional[str] = Field(
        default=None, description="Archivo de log rotativo en formato JSON"
    )

    # Configuración de CORS
    cors_allow_origin: str = Field(
        default="*", description="Valor de Access-Control-Allow-Origin"
    )

    # Configuración de Gemini (Vertex AI)
    google_cloud_project: Optional[str] = Field(
        default=None, description="Proyecto de Google Cloud para Vertex AI"
    )

    google_cloud_location: str = Field(
        default="global", description="Región de Vertex AI"
    )

    gemini_model: str = Field(
        default="gemini-2.0-flash", description="Modelo generativo a utilizar"
    )

    generation_temperature: float = Field(default=0.8, ge=0.0, le=2.0)

    generation_top_p: float = Field(default=1.0, ge=0.0, le=1.0)

    generation_max_output_tokens: int = Field(default=8192, ge=1)

    default_vocabulary_amount: int = Field(
        default=10, ge=1, description="Cantidad de palabras si no se indica 'amount'"
    )

    # Configuración de Google Cloud Translation
    translate_api_key: Optional[str] = Field(
        default=None, description="Clave API para Cloud Translation v2"
    )

    translate_base_url: str = Field(
        default="https://translation.googleapis.com/language/translate/v2",
        description="Endpoint REST de Cloud Translation v2",
    )

    translate_timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("debug")
    @classmethod
    def validate_debug(cls, v):
        """Valida el valor de debug para asegurarse de que sea booleano."""
        if not isinstance(v, bool):
            raise ValueError("El valor de debug debe ser booleano")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normaliza el nivel de logging y rechaza valores desconocidos."""
        if v is None or v == "":
            return None
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Nivel de logging inválido: {v}")
        return level


# Instancia global de configuración
settings = Settings()

# Constantes exportables para importación directa
DEBUG = settings.debug
HOST = settings.host
API_PORT = settings.api_port
SERVICE_NAME = settings.service_name

LOG_LEVEL = settings.log_level
LOG_FILE = settings.log_file

CORS_ALLOW_ORIGIN = settings.cors_allow_origin

GOOGLE_CLOUD_PROJECT = settings.google_cloud_project
GOOGLE_CLOUD_LOCATION = settings.google_cloud_location
GEMINI_MODEL = settings.gemini_model
GENERATION_TEMPERATURE = settings.generation_temperature
GENERATION_TOP_P = settings.generation_top_p
GENERATION_MAX_OUTPUT_TOKENS = settings.generation_max_output_tokens
DEFAULT_VOCABULARY_AMOUNT = settings.default_vocabulary_amount

TRANSLATE_API_KEY = settings.translate_api_key
TRANSLATE_BASE_URL = settings.translate_base_url
TRANSLATE_TIMEOUT_SECONDS = settings.translate_timeout_seconds
