"""Shopping cart — cart route group, mounted under /api/cart.

Handlers are owned by the cart route group; the registry mounts this router once.
"""

from fastapi import APIRouter

router = APIRouter(tags=["cart"])
