"""
Auth Service.

Registration and login: credential store, password hashing, and token
issuance. These operations do not go through the Auth Gateway.
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.core.exceptions import AuthenticationError, ValidationError
from quirknotes.core.security import (
    BCRYPT_MAX_PASSWORD_BYTES,
    TokenService,
    hash_password,
    verify_password,
)
from quirknotes.repositories.user import UserRepository
from quirknotes.schemas.user import UserCredentials
from quirknotes.services.base import BaseService


class AuthService(BaseService):
    """
    Service for account creation and authentication.

    bcrypt runs in a worker thread so a slow hash does not stall other
    requests on the event loop.
    """

    def __init__(
        self,
        session: AsyncSession,
        token_service: TokenService,
        bcrypt_rounds: int | None = None,
    ) -> None:
        super().__init__(session)
        self.repo = UserRepository(session)
        self.token_service = token_service
        self.bcrypt_rounds = bcrypt_rounds

    def _validate_credentials(self, data: UserCredentials, message: str) -> tuple[str, str]:
        self._validate_required(
            {"username": data.username, "password": data.password},
            ["username", "password"],
            message=message,
        )
        if len(data.password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                "Password is too long.",
                details={"password": f"Maximum length is {BCRYPT_MAX_PASSWORD_BYTES} bytes"},
            )
        return data.username, data.password

    async def register(self, data: UserCredentials) -> str:
        """
        Create a user and return a bearer token for it.

        Raises:
            ValidationError: If username or password is missing
            ConflictError: If the username is already taken
        """
        username, password = self._validate_credentials(
            data, "Username and password both needed to register."
        )
        self._log_operation("Registering user", username=username)

        password_hash = await asyncio.to_thread(hash_password, password, self.bcrypt_rounds)
        await self._execute_db_operation(
            "register_user",
            self.repo.register(username, password_hash),
            conflict_message="Username already exists.",
        )

        return self.token_service.issue(username)

    async def login(self, data: UserCredentials) -> str:
        """
        Check credentials and return a bearer token.

        Unknown usernames and wrong passwords fail the same way.

        Raises:
            ValidationError: If username or password is missing
            AuthenticationError: If the credentials do not match
        """
        username, password = self._validate_credentials(
            data, "Username and password both needed to login."
        )

        user = await self._execute_db_operation(
            "get_user",
            self.repo.get_by_username(username),
        )
        if user is None or not await asyncio.to_thread(
            verify_password, password, user.password_hash
        ):
            self._log_operation("Login rejected", username=username)
            raise AuthenticationError("Authentication failed.")

        self._log_operation("User logged in", username=username)
        return self.token_service.issue(username)
