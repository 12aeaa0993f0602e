"""Valid Controller.

입력받은 토큰이 유효한지 확인하는 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Query

from apps.jwt_auth.application.token.ports import TokenIssuer
from apps.jwt_auth.presentation.http.schemas import ErrorResponse
from apps.jwt_auth.setup.dependencies import get_token_manager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/valid", summary="토큰 검증", responses={401: {"model": ErrorResponse}})
async def valid(
    token: str = Query(..., description="검증할 JWT"),
    token_manager: TokenIssuer = Depends(get_token_manager),
) -> str:
    """토큰을 검증하고 클레임을 로그로 남깁니다."""
    token_manager.validate(token)
    claims = token_manager.extract_claims(token)

    logger.info(
        "Token validated",
        extra={
            "member_id": str(claims.member_id),
            "role": claims.role.value if claims.role else None,
            "subject": claims.subject.value,
            "issued_at": claims.issued_at,
            "expiration": claims.expiration,
        },
    )
    return "success"
