"""Exact-path redirect handler.

Wraps a fallback handler: paths found in the mapping are redirected,
everything else falls through untouched.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from urlshort._internal.invoke import invoke
from urlshort.http.request import Request
from urlshort.http.response import Response
from urlshort.routing.protocol import AnyHandler
from urlshort.routing.redirect import redirect_to

logger = logging.getLogger("urlshort.routing")


class MapHandler:
    """Handler that redirects mapped paths and delegates the rest.

    The lookup key is ``request.path`` exactly as received: trailing
    slashes and case are significant, and the query string is not part
    of the path. There is no prefix or wildcard matching.

    The mapping is copied at construction and exposed read-only, so a
    ``MapHandler`` holds no mutable state and can serve concurrent
    requests without locking.

    Usage::

        handler = MapHandler(
            {"/gh": "https://github.com", "/docs": "https://docs.example.com"},
            fallback=not_found,
        )
    """

    __slots__ = ("_fallback", "_paths")

    def __init__(self, paths_to_urls: Mapping[str, str], fallback: AnyHandler) -> None:
        self._paths: Mapping[str, str] = MappingProxyType(dict(paths_to_urls))
        self._fallback = fallback

    @property
    def paths(self) -> Mapping[str, str]:
        """The read-only path -> URL mapping."""
        return self._paths

    @property
    def fallback(self) -> AnyHandler:
        """The handler that receives unmapped requests."""
        return self._fallback

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"MapHandler({len(self._paths)} paths, fallback={self._fallback!r})"

    async def __call__(self, request: Request) -> Response:
        """Redirect a mapped path or fall through to the fallback."""
        path = request.path
        if path not in self._paths:
            return await invoke(self._fallback, request)

        url = self._paths[path]
        logger.debug("301 %s -> %s", path, url)
        return redirect_to(Response(), url)


def map_handler(paths_to_urls: Mapping[str, str], fallback: AnyHandler) -> MapHandler:
    """Build a handler that maps paths (keys) to their redirect URLs (values).

    Requests for paths not in *paths_to_urls* are passed to *fallback*
    with the request unchanged.
    """
    return MapHandler(paths_to_urls, fallback)
