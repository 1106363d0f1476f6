"""Request builders shared by the unit and integration tests."""

import base64
from typing import Optional

from starlette.requests import Request


def basic(user: str, password: str) -> str:
    """Authorization header value for user/password."""
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def make_request(authorization: Optional[str] = None) -> Request:
    """Bare GET request, optionally carrying an Authorization header."""
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": b"",
        "headers": headers,
    }
    return Request(scope)
