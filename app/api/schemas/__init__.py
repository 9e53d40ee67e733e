"""API schemas package"""

from app.api.schemas.health import HealthStatus
from app.api.schemas.hello import HelloMessage

__all__ = [
    "HealthStatus",
    "HelloMessage",
]
