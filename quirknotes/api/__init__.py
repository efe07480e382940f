"""
API Router.

Aggregates the endpoint routers. Routes are mounted at the root path.
"""

from fastapi import APIRouter

from quirknotes.api.endpoints import notes, users

router = APIRouter()

# Registration and login
router.include_router(users.router, tags=["users"])

# Note CRUD
router.include_router(notes.router, tags=["notes"])
