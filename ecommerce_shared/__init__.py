"""Ecommerce Shared — domain models, typed API client, and formatting/validation helpers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
