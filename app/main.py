import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# .env 파일 로드 (설정 생성보다 먼저)
load_dotenv()

from app.api.router import api_router
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging

logger = logging.getLogger("app.main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application from settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # 프론트엔드는 별도 정적 오리진에서 호출함
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_prefix = settings.api_prefix.rstrip("/")
    app.include_router(api_router, prefix=api_prefix)

    logger.info(
        "app created (env=%s, api_prefix=%s, port=%s)",
        settings.app_env,
        api_prefix or "/",
        settings.port,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("listening on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["app"],
    )
