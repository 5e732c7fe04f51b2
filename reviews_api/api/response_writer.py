"""Response Writer — the single place a pipeline outcome becomes an HTTP response.

Invariants:
    - Every review request ends in exactly one write_response() call
      (success path in the route, error path in error_handlers.py)
    - Bodies are pretty-printed JSON with non-ASCII text left unescaped
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """JSON with 4-space indentation and raw UTF-8 text."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content, ensure_ascii=False, indent=4,
        ).encode("utf-8")


def write_response(status_code: int, payload: Any) -> PrettyJSONResponse:
    """Serialize a success payload or an error body."""
    return PrettyJSONResponse(status_code=status_code, content=payload)
