"""ASGI handler — translates ASGI scope/messages to perch types.

The only component that touches raw ASGI directly. Builds a Request,
runs it through the middleware chain around asset dispatch, and sends
the Response back through ASGI send(). Every request ends in a
response; nothing propagates to the server.
"""

from collections.abc import Mapping
from typing import Any

from perch._internal.asgi import Receive, Scope, Send
from perch.assets.table import Asset
from perch.errors import HTTPError, MethodNotAllowed, NotFound
from perch.http.request import Request
from perch.http.response import Response
from perch.middleware.protocol import Middleware, Next
from perch.routing.resolver import resolve
from perch.server.errors import handle_http_error, handle_internal_error
from perch.server.render import render_asset
from perch.server.sender import send_response


def serve_asset(assets: Mapping[str, Asset], request: Request, *, no_cache: bool) -> Response:
    """GET-only asset dispatch.

    Raises:
        MethodNotAllowed: any method but GET; resolution is not attempted.
        NotFound: no candidate path is in the table.
        CompressionError: the asset body could not be gzipped.
    """
    if request.method != "GET":
        raise MethodNotAllowed()

    asset = resolve(assets, request.path)
    if asset is None:
        raise NotFound()
    return render_asset(asset, request.path, no_cache=no_cache)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    assets: Mapping[str, Asset],
    middleware: tuple[Middleware, ...],
    no_cache: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    # HTTP errors become responses inside the chain so middleware
    # (CORS) decorates 404 and 405 answers too.
    async def dispatch(req: Request) -> Response:
        try:
            return serve_asset(assets, req, no_cache=no_cache)
        except HTTPError as exc:
            return handle_http_error(exc, req)

    handler: Next = dispatch
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> Response:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    try:
        await send_response(response, send)
    except ValueError as exc:
        # Raised while encoding headers, before anything reached the wire.
        await send_response(handle_internal_error(exc, request), send)
