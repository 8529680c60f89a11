"""Storefront API — FastAPI application factory and exported ASGI app.

Invariants:
    - Middleware order per request: origin gate → CORS headers → exception
      mapping → static mount / route groups
    - CORS allow-list and upload directory come from settings (not hardcoded)
    - Route groups mounted once, from an explicit table (api/routes/registry.py)
    - Connectors connected in the lifespan, strategy chosen by deployment mode
    - Importing this module never opens a connection

Design Decisions:
    - `app` at module level is the hand-off point for embedded hosts
      (`app.main:app`); standalone runs go through app/server.py
    - create_app takes the context and route table so tests inject fakes
"""

from collections.abc import Mapping

from fastapi import APIRouter, FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.middleware import configure_cors
from app.api.routes import health
from app.api.routes.registry import ROUTE_GROUPS, mount_route_groups
from app.api.static import mount_uploads
from app.config import get_settings
from app.infrastructure.context import AppContext
from app.lifecycle import build_lifespan


def create_app(
    context: AppContext,
    route_groups: Mapping[str, APIRouter] | None = None,
) -> FastAPI:
    settings = context.settings
    app = FastAPI(
        title="Storefront API", version="1.0.0",
        lifespan=build_lifespan(context),
    )
    app.state.context = context

    configure_cors(app, settings.cors_origins)
    register_error_handlers(app)

    mount_uploads(app, settings.upload_dir)
    app.include_router(health.router)
    mount_route_groups(
        app, ROUTE_GROUPS if route_groups is None else route_groups,
    )
    return app


app = create_app(AppContext.from_settings(get_settings()))
