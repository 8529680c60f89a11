"""User accounts — registration, login, profile — user route group, mounted under /api/user.

Handlers are owned by the user route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["user"])
