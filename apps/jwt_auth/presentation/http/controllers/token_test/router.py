"""Token Test Router.

토큰 발급/검증 확인용 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.jwt_auth.presentation.http.controllers.token_test.claims import (
    router as claims_router,
)
from apps.jwt_auth.presentation.http.controllers.token_test.create import (
    router as create_router,
)
from apps.jwt_auth.presentation.http.controllers.token_test.valid import (
    router as valid_router,
)

router = APIRouter()

router.include_router(create_router)
router.include_router(valid_router)
router.include_router(claims_router)
