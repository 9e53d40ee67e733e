import logging

from fastapi import APIRouter

from app.api.schemas import HealthStatus
from app.services import status_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_model=HealthStatus,
    summary="Load balancer health check",
)
async def health_check() -> HealthStatus:
    """Return 200 with a fresh timestamp; polled by the ALB target group."""
    logger.debug("health check")
    return status_service.build_health_status()
