"""Static bearer-token authentication."""
import logging
import secrets

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings


logger = logging.getLogger(__name__)

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


class AuthenticationError(Exception):
    """Raised when a request carries no bearer token or the wrong one."""

    def __init__(self, message: str = "Unauthorized request") -> None:
        self.message = message
        super().__init__(message)


def is_valid_token(presented: str, expected: str) -> bool:
    """Compare tokens in constant time. An empty configured token never matches."""
    if not expected:
        return False
    return secrets.compare_digest(presented.encode(), expected.encode())


async def require_api_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Dependency that gates a route behind the configured API token.

    Raises:
        AuthenticationError: If the Authorization header is missing, is not a
            Bearer credential, or does not match `Settings.api_token`.
    """
    if credentials is None:
        logger.warning("Rejected request without bearer token")
        raise AuthenticationError()

    if not is_valid_token(credentials.credentials, settings.api_token):
        logger.warning("Rejected request with invalid bearer token")
        raise AuthenticationError()
