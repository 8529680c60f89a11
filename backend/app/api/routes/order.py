"""Orders — order route group, mounted under /api/order.

Handlers are owned by the order route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["order"])
