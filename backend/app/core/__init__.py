"""Core Layer — pure decisions and contracts, no IO, no HTTP framework.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Functions are pure and deterministic
"""
