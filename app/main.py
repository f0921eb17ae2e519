from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.envs import DEBUG
from .api.v1.health import router as health_router
from .api.v1.translate import router as translate_router
from .api.v1.vocabulary import router as vocabulary_router
from .api.v1.word_info import router as word_info_router
from .middleware import CORSHeadersMiddleware, ErrorHandlerMiddleware
from .services.genai_client import close_generative_client
from .services.translation_client import close_translation_client
from .utils.logging_config import get_logger, init_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestión del ciclo de vida de la aplicación
    """
    # Startup
    init_logging()
    logger.info("Starting Vocabulary API...")

    yield
    # Shutdown
    logger.info("Closing provider clients...")
    await close_translation_client()
    await close_generative_client()
    logger.info("API successfully shutdown")


app = FastAPI(
    title="Vocabulary API",
    description="Traducción, importación de vocabulario e información de palabras",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc" if DEBUG else None,
    openapi_url="/openapi.json",
)

# Orden importante: el último agregado es el más externo, así CORS
# también decora las respuestas de error
app.add_middleware(ErrorHandlerMiddleware)
app.add_middleware(CORSHeadersMiddleware)

# Incluir routers
app.include_router(translate_router)
app.include_router(vocabulary_router)
app.include_router(word_info_router)
app.include_router(health_router)

if __name__ == "__main__":
    import uvicorn

    from .api.envs import API_PORT, HOST

    uvicorn.run(
        "app.main:app",
        host=HOST,
        port=API_PORT,
        log_level="info",
        server_header=False,
        date_header=False,
    )
