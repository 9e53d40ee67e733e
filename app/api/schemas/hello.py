from pydantic import BaseModel


class HelloMessage(BaseModel):
    """인사 메시지 응답"""

    message: str
