"""Infrastructure Layer — external service connectors and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All connector failures mapped to ConnectorError subclasses (core/errors.py)
    - No connector retries; a failed connect is reported once

Design Decisions:
    - Connectors owned by AppContext (context.py), not module singletons
"""
