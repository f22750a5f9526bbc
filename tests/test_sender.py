"""Tests for urlshort.server.sender response emission rules."""

import pytest

from urlshort.http.response import Response
from urlshort.routing.redirect import redirect_to
from urlshort.server.sender import send_response


class TestSendResponse:
    @pytest.mark.asyncio
    async def test_redirect_headers(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(redirect_to(Response(), "https://github.com"), send)

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 301
        headers = dict(messages[0]["headers"])
        assert headers[b"location"] == b"https://github.com"
        assert headers[b"content-length"] == b"0"
        assert messages[1] == {"type": "http.response.body", "body": b""}

    @pytest.mark.asyncio
    async def test_204_drops_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("unexpected-body").with_status(204), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_200_preserves_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("ok"), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert headers[b"content-type"] == b"text/plain; charset=utf-8"
        assert messages[1]["body"] == b"ok"

    @pytest.mark.asyncio
    async def test_head_advertises_length_without_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("hello"), send, head=True)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"5"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_non_latin1_location_sent_as_utf8(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        url = "https://例え.jp/ページ"
        await send_response(redirect_to(Response(), url), send)

        assert messages[0]["status"] == 301
        headers = dict(messages[0]["headers"])
        assert headers[b"location"] == url.encode("utf-8")
