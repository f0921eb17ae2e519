"""Health - Endpoint básico de health check"""

from datetime import datetime

from fastapi import APIRouter

from ..envs import SERVICE_NAME
from ..models.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint básico de health check

    Returns:
        HealthResponse: Estado del servicio
    """
    return HealthResponse(
        status="healthy", timestamp=datetime.now(), service=SERVICE_NAME
    )
