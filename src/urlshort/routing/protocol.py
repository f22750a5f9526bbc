"""Handler protocol.

A handler is any callable matching::

    async def handler(request: Request) -> Response: ...

No base class required. ``MapHandler`` is a handler, and so is any
fallback it wraps, which makes handlers freely composable::

    inner = map_handler({"/gh": "https://github.com"}, not_found)
    outer = yaml_handler(Path("redirects.yaml").read_bytes(), inner)

Fallbacks may also be plain ``def`` functions; they are called through
``invoke`` so both shapes work.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from urlshort.http.request import Request
from urlshort.http.response import Response

# Anything usable as a fallback: sync or async, function or object
AnyHandler: TypeAlias = Callable[[Request], Response | Awaitable[Response]]


class Handler(Protocol):
    """Protocol for urlshort request handlers.

    Accepts both functions and callable objects::

        # Function handler
        async def hello(request: Request) -> Response:
            return Response("Hello, world!")

        # Class handler
        class Maintenance:
            async def __call__(self, request: Request) -> Response:
                return Response("Back soon", status=503)
    """

    async def __call__(self, request: Request) -> Response: ...
