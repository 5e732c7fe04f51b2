"""Authentication — resolves a presented API key to a principal id.

Invariants:
    - Absent key -> UnauthorizedError before any storage access
    - Storage failure during lookup -> InternalError("Authentication failed")
    - The principal id is opaque; review operations never interpret it
"""

import logging

from reviews_api.core.domain_types import PrincipalId
from reviews_api.core.errors import InternalError, StorageError, UnauthorizedError
from reviews_api.core.repository_protocols import ApiKeyRepository

logger = logging.getLogger(__name__)


async def authenticate(
    api_key: str | None, api_keys: ApiKeyRepository,
) -> PrincipalId:
    """Return the principal for an active key or raise."""
    if api_key is None:
        raise UnauthorizedError("API key is required")

    try:
        principal = await api_keys.find_active_principal(api_key)
    except StorageError as e:
        logger.error(
            f"API key lookup failed: {e.detail}",
            extra={"error_code": e.code},
        )
        raise InternalError("Authentication failed")

    if principal is None:
        logger.warning("Rejected invalid API key")
        raise UnauthorizedError("Invalid API key")
    return principal
