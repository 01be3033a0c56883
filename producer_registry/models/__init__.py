"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
"""

from producer_registry.models.producer import Producer  # noqa: F401
