"""Application Exceptions."""

from apps.jwt_auth.application.common.exceptions.base import ApplicationError
from apps.jwt_auth.application.common.exceptions.config import TokenConfigError

__all__ = ["ApplicationError", "TokenConfigError"]
