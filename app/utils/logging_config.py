"""
Configuración de logging para la aplicación
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..api.envs import DEBUG, LOG_FILE, LOG_LEVEL

# Campos opcionales que los módulos pasan vía `extra=`
_CONTEXT_FIELDS = (
    "request_id",
    "operation",
    "provider",
    "endpoint",
    "mode",
    "status_code",
    "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """Formateador JSON para logs estructurados"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in _CONTEXT_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        # Agregar información de excepción si existe
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Formateador con colores para consola"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        # Formato: [TIMESTAMP] LEVEL - MODULE.FUNCTION:LINE - MESSAGE
        formatted = (
            f"{color}[{datetime.fromtimestamp(record.created).strftime('%H:%M:%S')}] "
            f"{record.levelname:<8}{reset} - "
            f"{record.module}.{record.funcName}:{record.lineno} - "
            f"{record.getMessage()}"
        )

        extras = []
        if hasattr(record, "request_id"):
            extras.append(f"req_id={record.request_id}")
        if hasattr(record, "provider"):
            extras.append(f"provider={record.provider}")
        if hasattr(record, "duration_ms"):
            extras.append(f"duration={record.duration_ms:.2f}ms")

        if extras:
            formatted += f" [{', '.join(extras)}]"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    enable_json_logs: bool = False,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configura el sistema de logging

    Args:
        log_level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Archivo de log (opcional)
        enable_json_logs: Habilitar logs en formato JSON
        max_file_size: Tamaño máximo del archivo de log en bytes
        backup_count: Número de archivos de backup a mantener
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Limpiar handlers existentes
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        JSONFormatter() if enable_json_logs else ColoredFormatter()
    )
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_file_size, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(numeric_level)

        # Siempre usar JSON para archivos
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    configure_specific_loggers(numeric_level)

    logging.info(f"Logging configurado - Nivel: {log_level}, Archivo: {log_file}")


def configure_specific_loggers(level: int) -> None:
    """Configura loggers específicos para diferentes módulos"""

    for name in ("app.services", "app.api.v1", "app.middleware"):
        logging.getLogger(name).setLevel(level)

    # Reducir verbosidad de librerías externas
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)
    logging.getLogger("google.auth").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    if DEBUG:
        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("fastapi").setLevel(logging.INFO)
    else:
        logging.getLogger("uvicorn").setLevel(logging.WARNING)
        logging.getLogger("fastapi").setLevel(logging.WARNING)


class LoggerMixin:
    """Mixin para agregar logging contextual a clases"""

    @property
    def logger(self) -> logging.Logger:
        """Obtiene logger específico para la clase"""
        return logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def log_operation(self, operation: str, **kwargs) -> None:
        """Log de operación con contexto adicional"""
        extra = {"operation": operation}
        extra.update(kwargs)
        self.logger.info(f"Ejecutando operación: {operation}", extra=extra)

    def log_error(self, operation: str, error: Exception, **kwargs) -> None:
        """Log de error con contexto adicional"""
        extra = {"operation": operation}
        extra.update(kwargs)
        self.logger.error(
            f"Error en operación {operation}: {str(error)}", extra=extra, exc_info=error
        )

    def log_performance(self, operation: str, duration_ms: float, **kwargs) -> None:
        """Log de rendimiento con métricas"""
        extra = {"operation": operation, "duration_ms": duration_ms}
        extra.update(kwargs)

        if duration_ms > 5000:  # Las llamadas al modelo suelen tardar segundos
            self.logger.warning(
                f"Operación lenta: {operation} ({duration_ms:.2f}ms)", extra=extra
            )
        else:
            self.logger.debug(
                f"Operación completada: {operation} ({duration_ms:.2f}ms)", extra=extra
            )


def get_logger(name: str) -> logging.Logger:
    """
    Obtiene un logger con nombre específico

    Args:
        name: Nombre del logger

    Returns:
        Logger configurado
    """
    return logging.getLogger(name)


def init_logging():
    """Inicializa el logging con configuración por defecto"""
    log_level = LOG_LEVEL or ("DEBUG" if DEBUG else "INFO")

    setup_logging(
        log_level=log_level,
        log_file=LOG_FILE,
        enable_json_logs=not DEBUG,  # JSON en producción, colores en desarrollo
        max_file_size=10 * 1024 * 1024,  # 10MB
        backup_count=5,
    )
