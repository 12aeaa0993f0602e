"""Claims Controller.

Authorization 헤더의 Bearer 토큰 클레임을 반환합니다.
"""

from fastapi import APIRouter, Depends

from apps.jwt_auth.domain.value_objects.token_claims import TokenClaims
from apps.jwt_auth.presentation.http.auth import get_token_claims
from apps.jwt_auth.presentation.http.schemas import ErrorResponse, TokenClaimsResponse

router = APIRouter()


@router.get(
    "/claims",
    summary="토큰 클레임 조회",
    response_model=TokenClaimsResponse,
    responses={401: {"model": ErrorResponse}},
)
async def claims(
    token_claims: TokenClaims = Depends(get_token_claims),
) -> TokenClaimsResponse:
    return TokenClaimsResponse.from_claims(token_claims)
