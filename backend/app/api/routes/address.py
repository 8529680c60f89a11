"""Delivery addresses — address route group, mounted under /api/address.

Handlers are owned by the address route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["address"])
