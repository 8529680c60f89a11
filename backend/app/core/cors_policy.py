"""CORS Policy — pure origin admission decision, no HTTP framework involved.

Invariants:
    - Absent origin (None or "") is always allowed: same-origin and non-browser clients
    - Any other origin is allowed only on exact membership in the allow-list
"""

from collections.abc import Collection


def is_origin_allowed(origin: str | None, allowlist: Collection[str]) -> bool:
    """Decide whether a request from ``origin`` may receive a response."""
    if not origin:
        return True
    return origin in allowlist
