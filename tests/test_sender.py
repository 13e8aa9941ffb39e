"""Tests for combo.server.sender response emission rules."""

from combo.http.response import Response
from combo.server.sender import send_response


async def _capture(response: Response, **kwargs) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, **kwargs)
    return messages


class TestSendResponseNoBodyStatuses:
    async def test_204_drops_body_and_sets_zero_content_length(self) -> None:
        # Even if a handler accidentally attaches body content, sender must
        # enforce RFC no-body semantics for 204.
        messages = await _capture(Response("unexpected-body").with_status(204))

        assert messages[0]["type"] == "http.response.start"
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"

        assert messages[1]["type"] == "http.response.body"
        assert messages[1]["body"] == b""

    async def test_304_drops_body_and_sets_zero_content_length(self) -> None:
        messages = await _capture(Response("unexpected-body").with_status(304))

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    async def test_200_preserves_body(self) -> None:
        messages = await _capture(Response("ok"))

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert messages[1]["body"] == b"ok"


class TestSendResponseHeaders:
    async def test_content_type_first(self) -> None:
        response = Response("a{}", content_type="text/css; charset=utf-8")
        messages = await _capture(response.with_header("X-Extra", "1"))

        headers = messages[0]["headers"]
        assert headers[0] == (b"content-type", b"text/css; charset=utf-8")
        assert (b"x-extra", b"1") in headers

    async def test_utf8_content_length(self) -> None:
        messages = await _capture(Response("é"))

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"


class TestSendResponseHead:
    async def test_head_keeps_length_drops_body(self) -> None:
        messages = await _capture(Response("body{color:red}"), head=True)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"15"
        assert messages[1]["body"] == b""
