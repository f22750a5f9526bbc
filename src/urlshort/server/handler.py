"""ASGI handler — translates ASGI scopes to urlshort types.

The only component that touches raw HTTP ASGI messages. Converts the
scope to a Request, runs the handler chain, and sends the Response back
through ASGI send().
"""

import logging

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.invoke import invoke
from urlshort.http.request import Request
from urlshort.routing.protocol import AnyHandler
from urlshort.server.errors import handle_internal_error
from urlshort.server.sender import send_response

logger = logging.getLogger("urlshort.server")


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    handler: AnyHandler,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the handler chain."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await invoke(handler, request)
    except Exception:
        response = handle_internal_error(request, debug=debug)

    logger.debug("%s %s %d", request.method, request.url, response.status)
    await send_response(response, send, head=request.method == "HEAD")
