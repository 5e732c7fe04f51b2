"""Domain Types — identities, limits and enums shared by the review pipeline.

Invariants:
    - ReviewId and PrincipalId wrap bare primitives — never mix them up in signatures
    - Field limits live here only (validator and ORM columns read them)
    - All valid operations encoded as Enums — no raw string matching past the router

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ReviewId = NewType("ReviewId", int)
PrincipalId = NewType("PrincipalId", str)


# ─── Limits ──────────────────────────────────────────────────────

REVIEWS_RESOURCE = "reviews"
API_PREFIX_SEGMENT = "api"

PRODUCT_ID_MAX = 2**31 - 1

RATING_MIN = 1
RATING_MAX = 5
USER_NAME_MAX_LENGTH = 100
COMMENT_MAX_BYTES = 65_535

REVIEW_FIELDS = ("product_id", "user_name", "rating", "comment")
REQUIRED_CREATE_FIELDS = ("product_id", "user_name", "rating")


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """One variant per review handler."""
    LIST = "list"
    GET_ONE = "get_one"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ValidationMode(str, Enum):
    """Create requires fields; update validates only what is present."""
    CREATE = "create"
    UPDATE = "update"
