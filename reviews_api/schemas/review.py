"""Review Schemas — Pydantic models for the JSON the API returns.

Invariants:
    - ReviewResponse mirrors the stored row exactly (comment may be null)
    - Request bodies are NOT parsed here: core/review_input.py keeps
      "omitted" distinct from "null" for partial updates

Design Decisions:
    - from_attributes: ORM rows validate directly into responses
    - model_dump(mode="json") renders datetimes as ISO-8601 strings
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ReviewResponse(BaseModel):
    """Public review representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    user_name: str
    rating: int
    comment: str | None = None
    created_at: datetime


class ReviewCreatedResponse(BaseModel):
    message: str = "Review created successfully"
    id: int


class MessageResponse(BaseModel):
    message: str
