"""Tweet ORM — a short message addressed by an auto-increment integer id.

Invariants:
    - id is an integer primary key, assigned by the database, never updated
    - message is non-nullable, at most 280 chars (checked at the API boundary)

Design Decisions:
    - Timestamps maintained by the ORM, not exposed on the wire
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Tweet(Base):
    __tablename__ = "tweets"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    message: Mapped[str] = mapped_column(String(280), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
