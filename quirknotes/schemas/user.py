"""
User Schemas.

Request/response bodies for registration and login. Fields are optional
at the schema level so that missing credentials reach the service and
are reported as a 400 with the service's message.
"""

from pydantic import BaseModel, Field


class UserCredentials(BaseModel):
    """Username and password pair sent to /registerUser and /loginUser."""

    username: str | None = Field(
        default=None,
        max_length=255,
        examples=["alice"],
    )
    password: str | None = Field(
        default=None,
        examples=["secret1"],
    )


class TokenResponse(BaseModel):
    """Confirmation plus a freshly issued bearer token."""

    response: str
    token: str
