"""API Layer — middleware, static mount, routes, and error handlers.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Errors raised by the bootstrap layer return structured JSON responses
"""
