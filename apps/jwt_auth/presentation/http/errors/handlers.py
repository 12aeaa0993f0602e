"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.jwt_auth.application.common.exceptions import ApplicationError
from apps.jwt_auth.domain.exceptions.base import DomainError
from apps.jwt_auth.presentation.http.errors.translators import translate_domain_error


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code, code = translate_domain_error(exc)
        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": code},
            headers=headers,
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=500,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
