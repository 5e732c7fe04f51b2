"""Review Validation — field rules for create and partial update.

Invariants:
    - PURE: no IO, no async, no DB, no side effects
    - Returns a list of human-readable messages; empty list means valid
    - Required-field messages first, then per-field checks in column order
    - Update mode requires nothing and checks only present fields

Design Decisions:
    - Error list over exception: the caller reports every problem in one 400
    - Explicit null counts as absent for create's required fields, is rejected on
      update, and is accepted for create's comment (stored as NULL)
"""

from typing import Any

from reviews_api.core.domain_types import (
    COMMENT_MAX_BYTES,
    PRODUCT_ID_MAX,
    RATING_MAX,
    RATING_MIN,
    REQUIRED_CREATE_FIELDS,
    REVIEW_FIELDS,
    USER_NAME_MAX_LENGTH,
    ValidationMode,
)
from reviews_api.core.review_input import MISSING, ReviewInput, coerce_int

PRODUCT_ID_MESSAGE = "Product ID must be a positive integer"
USER_NAME_MESSAGE = (
    f"User name must not be empty and must be at most "
    f"{USER_NAME_MAX_LENGTH} characters"
)
RATING_MESSAGE = f"Rating must be an integer between {RATING_MIN} and {RATING_MAX}"
COMMENT_TYPE_MESSAGE = "Comment must be a string"
COMMENT_LENGTH_MESSAGE = "Comment is too long"


def validate_review(review: ReviewInput, mode: ValidationMode) -> list[str]:
    """Validate a review body for the given mode."""
    errors: list[str] = []

    if mode == ValidationMode.CREATE:
        for name in REQUIRED_CREATE_FIELDS:
            if getattr(review, name) is MISSING or getattr(review, name) is None:
                errors.append(f"Field '{name}' is required")
    else:
        for name in REVIEW_FIELDS:
            if getattr(review, name) is None:
                errors.append(f"Field '{name}' cannot be null")

    for name, check in _FIELD_CHECKS:
        value = getattr(review, name)
        if value is MISSING or value is None:
            continue
        message = check(value)
        if message:
            errors.append(message)

    return errors


# --- Per-field checks ---------------------------------------------------------

def check_product_id(value: Any) -> str | None:
    number = coerce_int(value)
    if number is None or not 0 < number <= PRODUCT_ID_MAX:
        return PRODUCT_ID_MESSAGE
    return None


def check_user_name(value: Any) -> str | None:
    if not isinstance(value, str):
        return USER_NAME_MESSAGE
    name = value.strip()
    if not name or len(name) > USER_NAME_MAX_LENGTH:
        return USER_NAME_MESSAGE
    return None


def check_rating(value: Any) -> str | None:
    number = coerce_int(value)
    if number is None or not RATING_MIN <= number <= RATING_MAX:
        return RATING_MESSAGE
    return None


def check_comment(value: Any) -> str | None:
    if not isinstance(value, str):
        return COMMENT_TYPE_MESSAGE
    if len(value.encode("utf-8")) > COMMENT_MAX_BYTES:
        return COMMENT_LENGTH_MESSAGE
    return None


_FIELD_CHECKS = (
    ("product_id", check_product_id),
    ("user_name", check_user_name),
    ("rating", check_rating),
    ("comment", check_comment),
)
