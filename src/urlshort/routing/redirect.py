"""Permanent redirect emission."""

from urlshort.http.response import Response


def redirect_to(response: Response, url: str) -> Response:
    """Turn *response* into a 301 pointing at *url*.

    Adds the ``Location`` header and sets the status to
    ``301 Moved Permanently``. The URL is passed through verbatim, even
    when empty or malformed; checking it is up to whoever wrote the
    mapping. No body is added.
    """
    return response.with_header("Location", url).with_status(301)
