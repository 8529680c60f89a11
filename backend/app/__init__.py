"""Storefront API Package — bootstrap and wiring for the e-commerce HTTP API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
