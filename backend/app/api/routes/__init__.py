"""Route Modules — one file per route group, plus health and the registry.

Invariants:
    - Each route group module defines its own APIRouter (no prefix; the registry owns prefixes)
    - Routes never contain bootstrap logic

Design Decisions:
    - Explicit registration in registry.py over auto-discovery
"""
