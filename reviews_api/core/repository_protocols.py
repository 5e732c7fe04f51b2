"""Boundary Protocols — contracts between the review pipeline and storage.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy types
    - Every implementation raises StorageError (core/errors.py) on driver failure
    - Write methods return the affected-row count; 0 is not an error here

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO; the pure core never awaits
"""

from datetime import datetime
from typing import Any, Protocol

from reviews_api.core.domain_types import PrincipalId, ReviewId


class ReviewRecord(Protocol):
    """Structural contract for a stored review row."""
    id: int
    product_id: int
    user_name: str
    rating: int
    comment: str | None
    created_at: datetime


class ReviewRepository(Protocol):
    """Contract for review persistence — implemented by infrastructure."""
    async def list_all(self) -> list[ReviewRecord]: ...
    async def get(self, review_id: ReviewId) -> ReviewRecord | None: ...
    async def exists(self, review_id: ReviewId) -> bool: ...
    async def create(self, columns: dict[str, Any]) -> ReviewId: ...
    async def update_fields(
        self, review_id: ReviewId, columns: dict[str, Any],
    ) -> int: ...
    async def delete(self, review_id: ReviewId) -> int: ...


class ApiKeyRepository(Protocol):
    """Contract for API key lookup — implemented by infrastructure."""
    async def find_active_principal(self, api_key: str) -> PrincipalId | None: ...
