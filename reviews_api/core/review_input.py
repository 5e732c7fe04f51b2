"""Review Input — decodes a request body into a sparse, typed field structure.

Invariants:
    - Each recognized field is either MISSING (omitted) or the raw decoded JSON value
    - An explicit JSON null is kept as None, distinct from MISSING
    - Unknown keys are dropped; they never reach storage
    - Decoding is pure: bytes in, ReviewInput out, BadRequestError on malformed data

Design Decisions:
    - Sentinel over Optional: partial update must tell "omitted" from "null"
    - Normalization (int coercion, trimming) lives next to decoding so the
      validator and the storage call agree on what a valid value looks like
"""

import json
from dataclasses import dataclass, fields
from typing import Any

from reviews_api.core.errors import BadRequestError

INVALID_JSON_MESSAGE = "Invalid JSON data"


class _Missing:
    """Marker for a field absent from the request body."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class ReviewInput:
    """The four writable review fields, each possibly MISSING."""
    product_id: Any = MISSING
    user_name: Any = MISSING
    rating: Any = MISSING
    comment: Any = MISSING

    @classmethod
    def from_mapping(cls, data: dict) -> "ReviewInput":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def is_present(self, name: str) -> bool:
        return getattr(self, name) is not MISSING

    def present_fields(self) -> list[str]:
        """Names of recognized fields supplied in the body, in column order."""
        return [f.name for f in fields(self) if self.is_present(f.name)]

    def to_columns(self) -> dict[str, Any]:
        """Normalized column values for every present field.

        Call only after validate_review() returned no errors.
        """
        columns: dict[str, Any] = {}
        for name in self.present_fields():
            value = getattr(self, name)
            if name in ("product_id", "rating"):
                value = coerce_int(value)
            elif name == "user_name":
                value = value.strip()
            columns[name] = value
        return columns


def decode_review_body(raw: bytes) -> ReviewInput:
    """Decode a JSON object body; anything else is 'Invalid JSON data'."""
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise BadRequestError(INVALID_JSON_MESSAGE)
    if not isinstance(data, dict):
        raise BadRequestError(INVALID_JSON_MESSAGE)
    return ReviewInput.from_mapping(data)


def _reject_constant(name: str) -> Any:
    """NaN and Infinity are not JSON."""
    raise ValueError(f"Non-standard JSON constant: {name}")


def coerce_int(value: Any) -> int | None:
    """Integer value of a JSON number or numeric string, else None.

    Booleans and non-integral numbers are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None
