"""Tests for perch.http.request — Request built from an ASGI scope."""

import pytest

from perch.http.request import Request


def _scope(**overrides: object) -> dict:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/docs/",
        "query_string": b"v=1",
        "headers": [(b"origin", b"https://a.test")],
    }
    scope.update(overrides)
    return scope


class TestFromAsgi:
    def test_fields(self) -> None:
        request = Request.from_asgi(_scope())
        assert request.method == "GET"
        assert request.path == "/docs/"

    def test_path_excludes_query_string(self) -> None:
        assert "v=1" not in Request.from_asgi(_scope()).path

    def test_origin(self) -> None:
        assert Request.from_asgi(_scope()).origin == "https://a.test"
        assert Request.from_asgi(_scope(headers=[])).origin is None

    def test_minimal_scope(self) -> None:
        request = Request.from_asgi({"type": "http", "method": "POST", "path": "/"})
        assert len(request.headers) == 0

    def test_frozen(self) -> None:
        request = Request.from_asgi(_scope())
        with pytest.raises(AttributeError):
            request.path = "/other"  # type: ignore[misc]
