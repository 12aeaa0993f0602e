"""API v1 Router."""

from fastapi import APIRouter

from apps.jwt_auth.presentation.http.controllers.token_test.router import (
    router as token_test_router,
)

router = APIRouter()

# Token test endpoints
router.include_router(token_test_router, prefix="/token-test", tags=["token-test"])
