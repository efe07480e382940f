"""
FastAPI Dependencies.

Shared dependencies for request handling. Services are built per request
from the request's database session and the app-wide token service.
"""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.core.auth import AuthGateway
from quirknotes.core.database import get_db_session
from quirknotes.core.security import TokenService
from quirknotes.services.auth import AuthService
from quirknotes.services.note import NoteService

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]

# Raw Authorization header, None when absent
AuthorizationHeader = Annotated[str | None, Header()]


def get_token_service(request: Request) -> TokenService:
    """Return the token service created with the app."""
    return request.app.state.token_service


def get_note_service(
    db: DbSession,
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> NoteService:
    """Build a NoteService for the current request."""
    return NoteService(db, AuthGateway(token_service))


def get_auth_service(
    request: Request,
    db: DbSession,
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Build an AuthService for the current request."""
    return AuthService(db, token_service, bcrypt_rounds=request.app.state.bcrypt_rounds)


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
