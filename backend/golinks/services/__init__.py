"""Services Layer — resolver and startup bootstrap.

Invariants:
    - Services compose the core cache with a LinkRepository
    - Store IO happens here, never inside the cache

Design Decisions:
    - Resolver is built per request around the shared cache (no hidden global)
"""
