"""Review Operations — list, get-one, create, partial update and delete.

Invariants:
    - Each operation returns exactly one OperationResult or raises a ReviewApiError
    - Mutating operations validate before touching storage
    - StorageError never crosses an operation: it becomes an InternalError with
      an operation-specific message (driver detail goes to the log only)
    - Update checks existence before validating the body (404 wins over 400)

Design Decisions:
    - Repository injected: the same class runs against SQL or test fakes
    - Check-then-act without isolation: a write hitting 0 rows after a successful
      existence check (concurrent delete) is logged and still reported as success
"""

import logging
from dataclasses import dataclass
from typing import Any

from reviews_api.core.domain_types import Operation, ReviewId, ValidationMode
from reviews_api.core.errors import (
    BadRequestError,
    InternalError,
    NotFoundError,
    StorageError,
    ValidationFailedError,
)
from reviews_api.core.repository_protocols import ReviewRepository
from reviews_api.core.review_input import ReviewInput, decode_review_body
from reviews_api.core.validate_review import validate_review
from reviews_api.schemas.review import (
    MessageResponse,
    ReviewCreatedResponse,
    ReviewResponse,
)

logger = logging.getLogger(__name__)

REVIEW_NOT_FOUND = "Review not found"
REVIEW_ID_REQUIRED = "Review ID is required"


@dataclass(frozen=True)
class OperationResult:
    """Successful outcome handed to the response writer."""
    status_code: int
    payload: Any


class ReviewOperations:
    """CRUD handlers for the reviews resource."""

    def __init__(self, reviews: ReviewRepository):
        self._reviews = reviews

    async def dispatch(
        self, operation: Operation, review_id: ReviewId | None, body: bytes,
    ) -> OperationResult:
        """Run the handler for one Operation."""
        if operation == Operation.LIST:
            return await self.list_reviews()
        if operation == Operation.GET_ONE:
            return await self.get_review(review_id)
        if operation == Operation.CREATE:
            return await self.create_review(body)
        if operation == Operation.UPDATE:
            return await self.update_review(review_id, body)
        if operation == Operation.DELETE:
            return await self.delete_review(review_id)
        raise ValueError(f"Unhandled operation: {operation}")

    async def list_reviews(self) -> OperationResult:
        try:
            rows = await self._reviews.list_all()
        except StorageError:
            raise InternalError("Failed to fetch reviews")
        return OperationResult(
            200,
            [ReviewResponse.model_validate(r).model_dump(mode="json") for r in rows],
        )

    async def get_review(self, review_id: ReviewId | None) -> OperationResult:
        if review_id is None:
            raise BadRequestError(REVIEW_ID_REQUIRED)
        try:
            row = await self._reviews.get(review_id)
        except StorageError:
            raise InternalError("Failed to fetch review")
        if row is None:
            raise NotFoundError(REVIEW_NOT_FOUND)
        return OperationResult(
            200, ReviewResponse.model_validate(row).model_dump(mode="json"),
        )

    async def create_review(self, body: bytes) -> OperationResult:
        review = decode_review_body(body)
        _raise_on_invalid(review, ValidationMode.CREATE)

        columns = review.to_columns()
        columns.setdefault("comment", None)
        try:
            review_id = await self._reviews.create(columns)
        except StorageError:
            raise InternalError("Failed to create review")

        logger.info(
            f"Review {review_id} created",
            extra={"operation": Operation.CREATE.value, "review_id": review_id},
        )
        return OperationResult(
            201, ReviewCreatedResponse(id=review_id).model_dump(),
        )

    async def update_review(
        self, review_id: ReviewId | None, body: bytes,
    ) -> OperationResult:
        if review_id is None:
            raise BadRequestError(REVIEW_ID_REQUIRED)
        review = decode_review_body(body)

        await self._require_existing(review_id, "Failed to update review")

        _raise_on_invalid(review, ValidationMode.UPDATE)
        columns = review.to_columns()
        if not columns:
            raise BadRequestError("No fields to update")

        try:
            affected = await self._reviews.update_fields(review_id, columns)
        except StorageError:
            raise InternalError("Failed to update review")
        _log_write(Operation.UPDATE, review_id, affected)
        return OperationResult(
            200, MessageResponse(message="Review updated successfully").model_dump(),
        )

    async def delete_review(self, review_id: ReviewId | None) -> OperationResult:
        if review_id is None:
            raise BadRequestError(REVIEW_ID_REQUIRED)

        await self._require_existing(review_id, "Failed to delete review")

        try:
            affected = await self._reviews.delete(review_id)
        except StorageError:
            raise InternalError("Failed to delete review")
        _log_write(Operation.DELETE, review_id, affected)
        return OperationResult(
            200, MessageResponse(message="Review deleted successfully").model_dump(),
        )

    async def _require_existing(self, review_id: ReviewId, failure: str) -> None:
        try:
            found = await self._reviews.exists(review_id)
        except StorageError:
            raise InternalError(failure)
        if not found:
            raise NotFoundError(REVIEW_NOT_FOUND)


def _raise_on_invalid(review: ReviewInput, mode: ValidationMode) -> None:
    errors = validate_review(review, mode)
    if errors:
        raise ValidationFailedError(errors)


def _log_write(operation: Operation, review_id: ReviewId, affected: int) -> None:
    extra = {"operation": operation.value, "review_id": review_id}
    if affected == 0:
        # Row vanished between the existence check and the write.
        logger.warning(f"Review {review_id} {operation.value}: 0 rows affected", extra=extra)
    else:
        logger.info(f"Review {review_id} {operation.value}d", extra=extra)
