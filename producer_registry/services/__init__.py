"""Services Layer — data access for producers.

Invariants:
    - Services receive their AsyncSession from the caller (dependency injection)
"""
