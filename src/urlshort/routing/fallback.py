"""Default fallback for unmapped paths."""

from urlshort.http.request import Request
from urlshort.http.response import Response


async def not_found(request: Request) -> Response:
    """Plain-text 404 for any request that reaches the end of the chain."""
    return Response(body=f"404 page not found: {request.path}\n", status=404)
