"""Product catalogue — product route group, mounted under /api/product.

Handlers are owned by the product route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["product"])
