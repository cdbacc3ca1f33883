"""Tests for perch.server.sender response emission rules."""

from perch.http.response import Response
from perch.server.sender import send_response


class TestSendResponse:
    async def test_204_drops_body_and_sets_zero_content_length(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("unexpected-body", status=204), send)

        assert messages[0]["type"] == "http.response.start"
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["type"] == "http.response.body"
        assert messages[1]["body"] == b""

    async def test_200_preserves_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response(b"\x1f\x8b binary", content_type="text/css"), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/css"
        assert headers[b"content-length"] == b"9"
        assert messages[1]["body"] == b"\x1f\x8b binary"

    async def test_header_names_lowercased(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("ok").with_header("ETag", "/a.css"), send)

        assert (b"etag", b"/a.css") in messages[0]["headers"]

    async def test_non_ascii_header_value_sent_as_utf8(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("ok").with_header("ETag", "/日本.css"), send)

        assert (b"etag", "/日本.css".encode()) in messages[0]["headers"]
