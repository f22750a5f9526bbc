"""Tests for urlshort.routing.handler — MapHandler lookup and fallthrough."""

import asyncio

import pytest

from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.routing.handler import MapHandler, map_handler


class RecordingFallback:
    """Fallback that records every request it receives."""

    def __init__(self) -> None:
        self.calls: list[Request] = []

    async def __call__(self, request: Request) -> Response:
        self.calls.append(request)
        return Response("fallback", status=404)


def _request(path: str) -> Request:
    return Request(method="GET", path=path)


class TestHit:
    @pytest.mark.asyncio
    async def test_redirects_mapped_path(self) -> None:
        fallback = RecordingFallback()
        handler = map_handler({"/gh": "https://github.com"}, fallback)

        response = await handler(_request("/gh"))

        assert response.status == 301
        assert response.location == "https://github.com"
        assert fallback.calls == []

    @pytest.mark.asyncio
    async def test_every_mapped_path(self) -> None:
        paths = {"/a": "http://a", "/b": "http://b", "/c/d": "http://c"}
        fallback = RecordingFallback()
        handler = map_handler(paths, fallback)

        for path, url in paths.items():
            response = await handler(_request(path))
            assert response.status == 301
            assert response.location == url
        assert fallback.calls == []

    @pytest.mark.asyncio
    async def test_empty_url_redirects_verbatim(self) -> None:
        handler = map_handler({"/blank": ""}, RecordingFallback())
        response = await handler(_request("/blank"))
        assert response.status == 301
        assert response.location == ""


class TestMiss:
    @pytest.mark.asyncio
    async def test_unknown_path_falls_through(self) -> None:
        fallback = RecordingFallback()
        handler = map_handler({"/gh": "https://github.com"}, fallback)
        request = _request("/unknown")

        response = await handler(request)

        assert response.text == "fallback"
        assert response.status == 404
        assert fallback.calls == [request]
        assert fallback.calls[0] is request

    @pytest.mark.asyncio
    async def test_empty_mapping_delegates_everything(self) -> None:
        fallback = RecordingFallback()
        handler = map_handler({}, fallback)

        for path in ("/", "/gh", "/anything/else"):
            await handler(_request(path))

        assert [r.path for r in fallback.calls] == ["/", "/gh", "/anything/else"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/gh/", "/GH", "/g", "/gh/extra", "gh"])
    async def test_no_normalization_or_prefix_matching(self, path: str) -> None:
        fallback = RecordingFallback()
        handler = map_handler({"/gh": "https://github.com"}, fallback)

        response = await handler(_request(path))

        assert response.location is None
        assert len(fallback.calls) == 1

    @pytest.mark.asyncio
    async def test_fallback_response_returned_unmodified(self) -> None:
        expected = Response("teapot", status=418).with_header("X-Fallback", "yes")

        async def fallback(request: Request) -> Response:
            return expected

        handler = map_handler({"/gh": "https://github.com"}, fallback)
        assert await handler(_request("/other")) is expected

    @pytest.mark.asyncio
    async def test_sync_fallback(self) -> None:
        def fallback(request: Request) -> Response:
            return Response(f"sync {request.path}")

        handler = map_handler({}, fallback)
        response = await handler(_request("/x"))
        assert response.text == "sync /x"


class TestComposition:
    @pytest.mark.asyncio
    async def test_handlers_chain(self) -> None:
        fallback = RecordingFallback()
        inner = map_handler({"/a": "http://inner-a", "/b": "http://inner-b"}, fallback)
        outer = map_handler({"/a": "http://outer-a"}, inner)

        assert (await outer(_request("/a"))).location == "http://outer-a"
        assert (await outer(_request("/b"))).location == "http://inner-b"
        await outer(_request("/c"))
        assert [r.path for r in fallback.calls] == ["/c"]

    @pytest.mark.asyncio
    async def test_concurrent_requests(self) -> None:
        fallback = RecordingFallback()
        handler = map_handler({"/gh": "https://github.com"}, fallback)

        responses = await asyncio.gather(
            *(handler(_request("/gh" if i % 2 else "/miss")) for i in range(20))
        )

        assert sum(1 for r in responses if r.status == 301) == 10
        assert len(fallback.calls) == 10


class TestMapHandler:
    def test_mapping_is_copied(self) -> None:
        source = {"/gh": "https://github.com"}
        handler = MapHandler(source, RecordingFallback())
        source["/new"] = "https://example.com"

        assert "/new" not in handler.paths
        assert len(handler) == 1

    def test_paths_read_only(self) -> None:
        handler = MapHandler({"/gh": "https://github.com"}, RecordingFallback())
        with pytest.raises(TypeError):
            handler.paths["/x"] = "y"  # type: ignore[index]

    def test_fallback_property(self) -> None:
        fallback = RecordingFallback()
        assert MapHandler({}, fallback).fallback is fallback

    def test_repr(self) -> None:
        handler = MapHandler({"/a": "http://a"}, RecordingFallback())
        assert repr(handler).startswith("MapHandler(1 paths")
