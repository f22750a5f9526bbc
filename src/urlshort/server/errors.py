"""Error handling for the request pipeline.

Redirect lookups cannot fail; the only thing that can is a fallback
handler. Its exceptions become a logged, plain-text 500.
"""

import logging

from urlshort.http.request import Request
from urlshort.http.response import Response

logger = logging.getLogger("urlshort.server")


def handle_internal_error(request: Request, *, debug: bool = False) -> Response:
    """Log the active exception and build a 500 response.

    Must be called from inside an ``except`` block. In debug mode the
    exception text is included in the body.
    """
    logger.exception("500 %s %s", request.method, request.path)
    body = "Internal Server Error"
    if debug:
        import traceback

        body = traceback.format_exc()
    return Response(body=body, status=500)
