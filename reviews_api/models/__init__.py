"""ORM Models — SQLAlchemy declarative models for the reviews database.

Invariants:
    - All models inherit from Base (db/base.py)
    - Review is the only resource; ApiKey is consulted by authentication only

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from reviews_api.models.review import Review  # noqa: F401
from reviews_api.models.api_key import ApiKey  # noqa: F401
