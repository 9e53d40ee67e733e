"""인사 메시지 라우트"""
from fastapi import APIRouter

from app.api.schemas import HelloMessage
from app.services import status_service

router = APIRouter()


@router.get("", response_model=HelloMessage, summary="Static greeting")
async def hello() -> HelloMessage:
    return status_service.build_hello_message()
