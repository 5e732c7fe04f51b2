"""API Key ORM — static credentials consulted by the authenticator.

Invariants:
    - api_key is unique; lookups match it exactly
    - Only rows with is_active = true authenticate
    - user_id is opaque to the review pipeline (passed through, never interpreted)
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from reviews_api.db.base import Base


class ApiKey(Base):
    """Issued API key (issuance and rotation happen outside this service)."""
    __tablename__ = "api_keys"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    api_key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
