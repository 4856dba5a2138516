"""Core Layer — pure domain logic, no IO, no network.

Invariants:
    - No module in core/ imports from schemas/, infrastructure/, or config
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell in infrastructure/
"""
