"""SQL Repositories — parameterized statements against `reviews` and `api_keys`.

Invariants:
    - Every statement is built with SQLAlchemy constructs (bound parameters, no string SQL)
    - Any SQLAlchemyError is rolled back and re-raised as StorageError
    - Writes commit before returning; return values are affected-row counts

Design Decisions:
    - One repository per table, both sharing the request's AsyncSession
    - Explicit column dicts in, ORM rows out: callers never see the session
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from reviews_api.core.domain_types import PrincipalId, ReviewId
from reviews_api.core.errors import StorageError
from reviews_api.models.api_key import ApiKey
from reviews_api.models.review import Review

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _storage_errors(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Translate driver failures into StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Storage failure during {operation}: {e}",
            extra={"error_code": "DATABASE_ERROR", "operation": operation},
        )
        raise StorageError(str(e), operation) from e


class SqlReviewRepository:
    """ReviewRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Review]:
        async with _storage_errors(self._db, "list"):
            result = await self._db.execute(
                select(Review).order_by(Review.created_at.desc(), Review.id.desc()),
            )
            return list(result.scalars().all())

    async def get(self, review_id: ReviewId) -> Review | None:
        async with _storage_errors(self._db, "get"):
            result = await self._db.execute(
                select(Review).where(Review.id == review_id),
            )
            return result.scalar_one_or_none()

    async def exists(self, review_id: ReviewId) -> bool:
        async with _storage_errors(self._db, "exists"):
            result = await self._db.execute(
                select(Review.id).where(Review.id == review_id),
            )
            return result.scalar_one_or_none() is not None

    async def create(self, columns: dict[str, Any]) -> ReviewId:
        async with _storage_errors(self._db, "create"):
            review = Review(**columns)
            self._db.add(review)
            await self._db.commit()
            await self._db.refresh(review)
            return ReviewId(review.id)

    async def update_fields(
        self, review_id: ReviewId, columns: dict[str, Any],
    ) -> int:
        async with _storage_errors(self._db, "update"):
            result = await self._db.execute(
                update(Review).where(Review.id == review_id).values(**columns),
            )
            await self._db.commit()
            return result.rowcount

    async def delete(self, review_id: ReviewId) -> int:
        async with _storage_errors(self._db, "delete"):
            result = await self._db.execute(
                delete(Review).where(Review.id == review_id),
            )
            await self._db.commit()
            return result.rowcount


class SqlApiKeyRepository:
    """ApiKeyRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_active_principal(self, api_key: str) -> PrincipalId | None:
        async with _storage_errors(self._db, "authenticate"):
            result = await self._db.execute(
                select(ApiKey.user_id).where(
                    ApiKey.api_key == api_key, ApiKey.is_active.is_(True),
                ),
            )
            user_id = result.scalar_one_or_none()
            return PrincipalId(str(user_id)) if user_id is not None else None
