"""
Security Utilities.

Password hashing (bcrypt) and bearer token signing/verification (JWT).
"""

from calendar import timegm
from datetime import timedelta

import bcrypt
from jose import JWTError, jwt

from quirknotes.core.config import get_app_config, get_settings
from quirknotes.core.exceptions import AuthenticationError
from quirknotes.core.logging import get_logger
from quirknotes.core.utils import utc_now

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password using bcrypt with a fresh salt.

    rounds defaults to security.password.bcrypt_rounds from security.yaml.
    """
    if rounds is None:
        rounds = get_app_config().security.password.bcrypt_rounds
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Returns False on mismatch. A malformed hash raises ValueError.
    """
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


class TokenService:
    """
    Issues and verifies signed, time-limited bearer tokens.

    Verification is stateless: tokens cannot be revoked before they expire,
    so there is no logout. The signing secret is fixed for the lifetime of
    the instance.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=1),
        audience: str | None = None,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_delta = expires_delta
        self._audience = audience

    @classmethod
    def from_config(cls) -> "TokenService":
        """Build a TokenService from config/.env and security.yaml."""
        security = get_app_config().security
        secret = get_settings().jwt_secret

        if len(secret) < security.secrets_validation.jwt_secret_min_length:
            raise ValueError(
                "JWT_SECRET is shorter than "
                f"{security.secrets_validation.jwt_secret_min_length} characters"
            )

        return cls(
            secret=secret,
            algorithm=security.jwt.algorithm,
            expires_delta=timedelta(minutes=security.jwt.access_token_expire_minutes),
            audience=security.jwt.audience,
        )

    @property
    def expires_delta(self) -> timedelta:
        return self._expires_delta

    def issue(self, username: str) -> str:
        """
        Create a token binding the given username.

        Args:
            username: Subject of the token

        Returns:
            Encoded JWT
        """
        issued_at = utc_now()
        claims = {
            "sub": username,
            "iat": issued_at,
            "exp": issued_at + self._expires_delta,
            "type": "access",
        }
        if self._audience:
            claims["aud"] = self._audience
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Validate a token and return the username it binds.

        Raises:
            AuthenticationError: If the token is malformed, tampered with,
                signed with another key, or expired. The error is the same
                in every case.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.warning("Token verification failed", extra={"error": type(e).__name__})
            raise AuthenticationError("Invalid or expired token")

        # The JWT library allows a token through during its exp second.
        if payload["exp"] <= timegm(utc_now().utctimetuple()):
            logger.warning("Token verification failed", extra={"error": "ExpiredSignatureError"})
            raise AuthenticationError("Invalid or expired token")

        username = payload["sub"]
        if not username:
            raise AuthenticationError("Invalid or expired token")
        return username
