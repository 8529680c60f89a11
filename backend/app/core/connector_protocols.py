"""Connector Protocol — contract between the lifecycle controller and external services.

Invariants:
    - connect() resolves on success or raises ConnectorError (core/errors.py)
    - close() is safe to call whether or not connect() succeeded

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol


class Connector(Protocol):
    """Establishes and holds a reusable session to an external service."""
    async def connect(self) -> None: ...
    async def close(self) -> None: ...
