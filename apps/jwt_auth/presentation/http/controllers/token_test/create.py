"""Create Controller.

토큰 쌍 발급 확인용 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query, status

from apps.jwt_auth.application.token.ports import TokenIssuer
from apps.jwt_auth.domain.enums.role import Role
from apps.jwt_auth.presentation.http.schemas import TokenPairResponse
from apps.jwt_auth.setup.dependencies import get_token_manager

router = APIRouter()


@router.post(
    "/create",
    summary="토큰 쌍 발급",
    response_model=TokenPairResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create(
    member_id: int = Query(1, description="회원 ID"),
    role: Role = Query(Role.ADMIN, description="회원 역할"),
    token_manager: TokenIssuer = Depends(get_token_manager),
) -> TokenPairResponse:
    """주어진 회원 ID/역할로 액세스/리프레시 토큰 쌍을 발급합니다."""
    pair = token_manager.issue(member_id, role)
    return TokenPairResponse.from_pair(pair)
