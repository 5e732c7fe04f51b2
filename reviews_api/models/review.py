"""Review ORM — one product review row in the `reviews` table.

Invariants:
    - id is an autoincrement integer primary key assigned by the database
    - created_at is set once on insert and never updated
    - rating and product_id ranges are enforced by validation before insert

Design Decisions:
    - Python-side created_at default: microsecond precision keeps listing order
      stable across drivers whose CURRENT_TIMESTAMP is second-resolution
    - Index on created_at: the only sort key the API exposes
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reviews_api.core.domain_types import USER_NAME_MAX_LENGTH
from reviews_api.db.base import Base


class Review(Base):
    """Product review."""
    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    user_name: Mapped[str] = mapped_column(
        String(USER_NAME_MAX_LENGTH), nullable=False,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
