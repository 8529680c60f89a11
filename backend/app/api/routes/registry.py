"""Route Registry — fixed prefix → route group table, mounted once at startup.

Invariants:
    - Seven prefixes, each owned by exactly one route group
    - Table is read-only (MappingProxyType); no remounting or hot swap
    - No catch-all: unmatched paths fall through to the framework 404
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from fastapi import APIRouter, FastAPI

from app.api.routes import address, cart, order, payment, product, seller, user

logger = logging.getLogger(__name__)

ROUTE_GROUPS: Mapping[str, APIRouter] = MappingProxyType({
    "/api/user": user.router,
    "/api/seller": seller.router,
    "/api/product": product.router,
    "/api/cart": cart.router,
    "/api/address": address.router,
    "/api/order": order.router,
    "/api/payment": payment.router,
})


def mount_route_groups(
    app: FastAPI, route_groups: Mapping[str, APIRouter] = ROUTE_GROUPS,
) -> None:
    for prefix, router in route_groups.items():
        app.include_router(router, prefix=prefix)
        logger.debug("Mounted route group", extra={"prefix": prefix})
