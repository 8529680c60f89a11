"""Seller accounts and seller-side catalogue management — seller route group, mounted under /api/seller.

Handlers are owned by the seller route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["seller"])
