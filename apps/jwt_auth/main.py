"""JWT Auth API Application Entry Point.

토큰 발급/검증 확인용 HTTP 엔드포인트를 제공합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.jwt_auth.presentation.http.controllers import root_router
from apps.jwt_auth.presentation.http.errors import register_exception_handlers
from apps.jwt_auth.setup.config import get_settings
from apps.jwt_auth.setup.dependencies import get_token_manager
from apps.jwt_auth.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    # Startup: 설정 오류는 기동 시점에 드러나야 한다
    get_token_manager()
    logger.info("Starting JWT Auth API")

    yield

    # Shutdown
    logger.info("Shutting down JWT Auth API")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging("DEBUG" if settings.environment == "local" else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="JWT 토큰 발급/검증 서비스",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
        }

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.jwt_auth.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
