"""API 라우터"""
from fastapi import APIRouter

from app.api.routes import health, hello

api_router = APIRouter()

# 로드밸런서 헬스 체크
api_router.include_router(health.router, prefix="/health", tags=["health"])

api_router.include_router(hello.router, prefix="/hello", tags=["hello"])
