"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tweet and User are independent; no relationships in scope

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from app.models.tweet import Tweet  # noqa: F401
from app.models.user import User  # noqa: F401
