"""Pydantic Schemas — the domain data contracts exchanged with the backend API.

Invariants:
    - Schemas validate at the system boundary (API responses, request bodies)
    - Enum fields use the str Enums from core/domain_types.py
    - Wire form is camelCase JSON; Python attributes are snake_case

Design Decisions:
    - Pure data contracts: no behaviour beyond small read-only lookups
"""
