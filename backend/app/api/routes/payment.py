"""Payments — payment route group, mounted under /api/payment.

Handlers are owned by the payment route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["payment"])
