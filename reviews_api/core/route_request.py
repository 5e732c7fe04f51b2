"""Request Routing — closed router for the single `reviews` resource.

Invariants:
    - PURE: path string in, Route out, NotFoundError on unknown endpoints/resources
    - The id segment never raises: "12abc" -> 12, "abc" -> absent, "0" -> absent
    - Method dispatch happens after authentication, so it is a separate step

Design Decisions:
    - Explicit Operation enum over a switch on method strings
    - Not a general dispatcher: any resource other than `reviews` is a 404
"""

import re
from dataclasses import dataclass

from reviews_api.core.domain_types import (
    API_PREFIX_SEGMENT,
    REVIEWS_RESOURCE,
    Operation,
    ReviewId,
)
from reviews_api.core.errors import MethodNotAllowedError, NotFoundError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Route:
    """Parsed request target."""
    resource: str
    resource_id: ReviewId | None = None


def parse_route(path: str) -> Route:
    """Split `/api/<resource>[/<id>]` into a Route."""
    segments = path.strip("/").split("/")
    if len(segments) < 2 or segments[0] != API_PREFIX_SEGMENT:
        raise NotFoundError("Endpoint not found")

    resource = segments[1]
    resource_id = parse_resource_id(segments[2]) if len(segments) > 2 else None

    if resource != REVIEWS_RESOURCE:
        raise NotFoundError("Resource not found")
    return Route(resource=resource, resource_id=resource_id)


def parse_resource_id(segment: str) -> ReviewId | None:
    """Integer prefix of a path segment; 0 or no digits means absent."""
    match = _LEADING_INT.match(segment)
    if not match:
        return None
    value = int(match.group(1))
    return ReviewId(value) if value != 0 else None


_METHOD_OPERATIONS = {
    "POST": Operation.CREATE,
    "PUT": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}


def resolve_operation(route: Route, method: str) -> Operation:
    """Map HTTP method (and id presence for GET) to an Operation."""
    method = method.upper()
    if method == "GET":
        return Operation.GET_ONE if route.resource_id is not None else Operation.LIST
    operation = _METHOD_OPERATIONS.get(method)
    if operation is None:
        raise MethodNotAllowedError(method)
    return operation
