"""Frontend package - 백엔드 헬스 상태를 한 줄로 표시하는 클라이언트 뷰"""

from app.frontend.config import FrontendSettings, get_frontend_settings
from app.frontend.health_view import ERROR_STATUS, LOADING_STATUS, HealthView

__all__ = [
    "ERROR_STATUS",
    "LOADING_STATUS",
    "FrontendSettings",
    "HealthView",
    "get_frontend_settings",
]
