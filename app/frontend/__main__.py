"""python -m app.frontend: 백엔드 헬스 상태를 한 번 조회해 출력"""

import asyncio

from dotenv import load_dotenv

from app.frontend.config import get_frontend_settings
from app.frontend.health_view import HealthView


def main() -> None:
    load_dotenv()
    settings = get_frontend_settings()
    view = HealthView(settings.api_base_url)
    print(asyncio.run(view.mount()))


if __name__ == "__main__":
    main()
