"""Infrastructure Layer — HTTP client and cross-cutting concerns.

Invariants:
    - Infrastructure depends on core/ and schemas/, never the other way round
    - Every network call is normalized into a Result envelope at this boundary

Design Decisions:
    - Thin stateless wrapper over httpx: no retries, no caching, no pooling
"""
