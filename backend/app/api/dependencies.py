"""Route Group Dependencies — access to the shared application context.

Invariants:
    - Handlers reach connectors only through AppContext on app.state
    - get_database raises DatabaseConnectionError (503) when not connected
"""

from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from app.infrastructure.context import AppContext
from app.infrastructure.media import MediaConnector


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_database(context: AppContext = Depends(get_context)) -> AsyncDatabase:
    """FastAPI dependency for the document database handle."""
    return context.database.database


def get_media(context: AppContext = Depends(get_context)) -> MediaConnector:
    return context.media
