"""상태 응답 생성 서비스"""
from datetime import datetime, timezone
from typing import Optional

from app.api.schemas import HealthStatus, HelloMessage

HELLO_MESSAGE = "Hello from backend via ALB"


def build_health_status(now: Optional[datetime] = None) -> HealthStatus:
    """
    헬스 체크 응답 생성

    Args:
        now: 응답에 기록할 시각 (기본값: 현재 UTC 시각)

    Returns:
        status가 항상 "ok"인 HealthStatus
    """
    return HealthStatus(status="ok", ts=now or datetime.now(timezone.utc))


def build_hello_message() -> HelloMessage:
    """고정 인사 메시지 반환"""
    return HelloMessage(message=HELLO_MESSAGE)
