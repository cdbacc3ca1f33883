"""Error responses for the request pipeline.

Perch has no error pages: an ``HTTPError`` becomes its status with the
detail as a plain-text body, anything else becomes an empty 500.
"""

import logging

from perch.errors import HTTPError
from perch.http.request import Request
from perch.http.response import Response

logger = logging.getLogger("perch.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to its plain-text response."""
    logger.debug("%d %s %s", exc.status, request.method, request.path)
    response = Response(body=exc.detail, status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected failure and answer with an empty 500."""
    logger.exception("500 %s %s", request.method, request.path)
    return Response(body=b"", status=500)
