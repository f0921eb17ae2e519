"""Errores de dominio compartidos por los servicios y el middleware de errores"""

from typing import Optional


class MissingParametersError(Exception):
    """Faltan parámetros obligatorios en la request"""

    status_code = 400

    def __init__(self, message: str = "Missing query parameters"):
        super().__init__(message)
        self.public_message = message


class ProviderError(Exception):
    """Error no controlado al hablar con un proveedor externo

    El mensaje público es el texto plano devuelto al cliente; el detalle
    (``str(exc)``) sólo se registra en los logs.
    """

    status_code = 500
    public_message = "Provider error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.public_message)


class TranslationServiceError(ProviderError):
    """Fallo del proveedor de traducción"""

    public_message = "Translation error"


class GenerativeServiceError(ProviderError):
    """Fallo del proveedor del modelo generativo"""

    public_message = "Generative model error"


class VocabularyGenerationError(ProviderError):
    public_message = "Vocabulary generation error"


class WordInfoError(ProviderError):
    public_message = "Word info error"


class ModelOutputError(Exception):
    """La salida del modelo no cumple el formato esperado

    Se responde como JSON ``{"error": public_message}``.
    """

    status_code = 500
    public_message = "Unexpected model response format"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.public_message)


class TokenLimitExceededError(ModelOutputError):
    public_message = "Max amount of tokens reached"


class EmptyOutputError(ModelOutputError):
    public_message = "Output is empty"


class MalformedOutputError(ModelOutputError):
    public_message = "Unexpected model response format (JSON parse failed)"


class SchemaMismatchError(ModelOutputError):
    """El JSON decodificado no tiene la forma declarada"""

    def __init__(self, public_message: str, detail: Optional[str] = None):
        super().__init__(detail or public_message)
        self.public_message = public_message
