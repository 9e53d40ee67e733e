"""백엔드 헬스 상태 뷰"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

LOADING_STATUS = "loading..."
ERROR_STATUS = "Error"


class HealthView:
    """
    백엔드 헬스 상태 표시 뷰

    mount() 시 `<base_url>/api/health`로 단 한 번 요청하고,
    성공하면 응답의 status 값을, 실패하면 "Error"를 표시한다.
    재시도, 타임아웃 조정, 취소는 하지 않는다.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.status = LOADING_STATUS
        self._client = client

    @property
    def health_url(self) -> str:
        return f"{self.base_url}/api/health"

    def render(self) -> str:
        return f"Backend health: {self.status}"

    async def mount(self) -> str:
        """헬스 엔드포인트를 한 번 조회하고 표시 문자열 반환"""
        try:
            self.status = await self._fetch_status()
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.warning("backend health fetch failed: %r", exc)
            self.status = ERROR_STATUS
        return self.render()

    async def _fetch_status(self) -> str:
        if self._client is not None:
            response = await self._client.get(self.health_url, follow_redirects=True)
        else:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(self.health_url)
        response.raise_for_status()

        status = response.json()["status"]
        if not isinstance(status, str):
            raise TypeError(f"unexpected status value: {status!r}")
        return status
