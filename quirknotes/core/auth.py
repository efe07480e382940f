"""
Auth Gateway.

Turns a raw Authorization header into an authenticated username.
Every note operation passes through AuthGateway.authenticate before it
reaches the repository. The token claim is trusted as-is: there is no
user lookup, so a token stays valid even if its user no longer exists.
"""

from quirknotes.core.exceptions import AuthenticationError
from quirknotes.core.logging import get_logger
from quirknotes.core.security import TokenService

logger = get_logger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header value.

    Raises:
        AuthenticationError: If the header is missing or not in bearer form
    """
    if not authorization:
        raise AuthenticationError("Unauthorized.")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        raise AuthenticationError("Unauthorized.")

    return parts[1]


class AuthGateway:
    """Verifies bearer credentials on behalf of the note operations."""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def authenticate(self, authorization: str | None) -> str:
        """
        Authenticate a request from its Authorization header.

        Args:
            authorization: Raw header value, or None when absent

        Returns:
            Username bound by the token

        Raises:
            AuthenticationError: Header absent, malformed, or token rejected
        """
        token = extract_bearer_token(authorization)
        try:
            username = self.token_service.verify(token)
        except AuthenticationError:
            raise AuthenticationError("Unauthorized.")

        logger.debug("Request authenticated", extra={"username": username})
        return username
