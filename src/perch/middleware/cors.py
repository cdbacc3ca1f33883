"""CORS middleware.

Applied uniformly in front of asset resolution. Answers preflight
requests itself and decorates every other cross-origin response.
"""

from dataclasses import dataclass

from perch.http.request import Request
from perch.http.response import Response
from perch.middleware.protocol import Next


@dataclass(frozen=True, slots=True)
class CORSConfig:
    """CORS configuration.

    The defaults are what a public static asset server wants: any
    origin may ``GET`` with any request headers.
    """

    allow_origins: tuple[str, ...] = ("*",)
    allow_methods: tuple[str, ...] = ("GET",)
    allow_headers: tuple[str, ...] = ("*",)
    expose_headers: tuple[str, ...] = ()
    max_age: int = 600  # 10 minutes


class CORSMiddleware:
    """Adds CORS headers and short-circuits preflight ``OPTIONS`` requests.

    - No ``Origin`` header: not a CORS request, passed through untouched.
    - Origin not allowed: passed through without CORS headers, so the
      browser blocks the response.
    - ``OPTIONS`` with ``Access-Control-Request-Method``: 204 preflight,
      carrying CORS headers only when the requested method is allowed.
    """

    __slots__ = ("config",)

    def __init__(self, config: CORSConfig | None = None) -> None:
        self.config = config or CORSConfig()

    def _is_allowed_origin(self, origin: str) -> bool:
        if "*" in self.config.allow_origins:
            return True
        return origin in self.config.allow_origins

    def _add_cors_headers(self, response: Response, origin: str) -> Response:
        cfg = self.config
        if "*" in cfg.allow_origins:
            response = response.with_header("Access-Control-Allow-Origin", "*")
        else:
            response = response.with_header("Access-Control-Allow-Origin", origin)
            response = response.with_header("Vary", "Origin")

        if cfg.expose_headers:
            response = response.with_header(
                "Access-Control-Expose-Headers",
                ", ".join(cfg.expose_headers),
            )
        return response

    def _preflight_response(self, request: Request, origin: str) -> Response:
        cfg = self.config
        response = self._add_cors_headers(Response(body="", status=204), origin)
        response = response.with_header("Access-Control-Allow-Methods", ", ".join(cfg.allow_methods))

        # A wildcard reflects whatever the browser asked to send.
        requested = request.headers.get("access-control-request-headers")
        if "*" in cfg.allow_headers and requested:
            response = response.with_header("Access-Control-Allow-Headers", requested)
        elif cfg.allow_headers and "*" not in cfg.allow_headers:
            response = response.with_header(
                "Access-Control-Allow-Headers",
                ", ".join(cfg.allow_headers),
            )

        return response.with_header("Access-Control-Max-Age", str(cfg.max_age))

    async def __call__(self, request: Request, next: Next) -> Response:
        """Process the request with CORS handling."""
        origin = request.origin
        if origin is None or not self._is_allowed_origin(origin):
            return await next(request)

        requested_method = request.headers.get("access-control-request-method")
        if request.method == "OPTIONS" and requested_method is not None:
            if requested_method.upper() not in self.config.allow_methods:
                # Answered, but without CORS headers the browser aborts.
                return Response(body="", status=204)
            return self._preflight_response(request, origin)

        response = await next(request)
        return self._add_cors_headers(response, origin)
