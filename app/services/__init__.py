"""Services package - 응답 생성 로직"""
# noqa: D104

from . import status_service

__all__ = [
    "status_service",
]
