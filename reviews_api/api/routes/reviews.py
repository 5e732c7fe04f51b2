"""Reviews Endpoint — the request pipeline for everything under /api.

Invariants:
    - OPTIONS answers 200 with an empty body before routing or authentication
    - Order per request: route -> authenticate -> method dispatch -> operation -> respond
    - Authentication precedes every storage access and every body read
    - Methods outside _ACCEPTED_METHODS get the same route and key checks before 405
      (reject_unrouted_method, called from error_handlers.py)
    - The route returns through write_response(); errors go through error_handlers.py

Design Decisions:
    - One catch-all path instead of FastAPI path params: the closed router in
      core/route_request.py owns 404 semantics and lenient id parsing
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from reviews_api.api.response_writer import write_response
from reviews_api.core.domain_types import Operation
from reviews_api.core.errors import MethodNotAllowedError
from reviews_api.core.route_request import parse_route, resolve_operation
from reviews_api.infrastructure.database import get_db, get_db_manager
from reviews_api.infrastructure.review_repository import (
    SqlApiKeyRepository,
    SqlReviewRepository,
)
from reviews_api.services.authenticate import authenticate
from reviews_api.services.review_operations import ReviewOperations

logger = logging.getLogger(__name__)
router = APIRouter(tags=["reviews"])

_ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
_BODY_OPERATIONS = (Operation.CREATE, Operation.UPDATE)


@router.api_route("/{path:path}", methods=_ACCEPTED_METHODS)
async def handle_request(request: Request, db: AsyncSession = Depends(get_db)):
    """Route, authenticate and run one review operation."""
    if request.method == "OPTIONS":
        return Response(status_code=200)

    route = parse_route(request.url.path)

    header = request.app.state.settings.api_key_header
    principal = await authenticate(
        request.headers.get(header), SqlApiKeyRepository(db),
    )

    operation = resolve_operation(route, request.method)
    body = await request.body() if operation in _BODY_OPERATIONS else b""

    logger.debug(
        f"{request.method} {request.url.path} -> {operation.value}",
        extra={"operation": operation.value, "principal_id": principal},
    )
    result = await ReviewOperations(SqlReviewRepository(db)).dispatch(
        operation, route.resource_id, body,
    )
    return write_response(result.status_code, result.payload)


async def reject_unrouted_method(request: Request) -> None:
    """Methods the catch-all does not accept: route, authenticate, then 405.

    Always raises a ReviewApiError.
    """
    parse_route(request.url.path)

    header = request.app.state.settings.api_key_header
    async with get_db_manager(request).session() as db:
        await authenticate(request.headers.get(header), SqlApiKeyRepository(db))

    raise MethodNotAllowedError(request.method)
