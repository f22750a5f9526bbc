"""ASGI response sending — translates a Response into ASGI messages."""

from urlshort._internal.asgi import Send
from urlshort.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _encode_value(value: str) -> bytes:
    """Header value bytes, sent as UTF-8 exactly as configured.

    Redirect URLs come from user files and may hold any character, so
    values are never re-quoted and never rejected.
    """
    return value.encode("utf-8", "surrogatepass")


def _encode_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    """Lower-cased raw header pairs, content-type first, content-length last."""
    raw = [(b"content-type", _encode_value(response.content_type))]
    raw.extend(
        (name.lower().encode("latin-1"), _encode_value(value))
        for name, value in response.headers
    )
    raw.append((b"content-length", str(content_length).encode("latin-1")))
    return raw


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* as one ``http.response.start`` and one body message.

    ``content-length`` is always set. Statuses that forbid a body are
    sent with an empty one. For ``HEAD`` requests the length of the
    would-be body is advertised but no bytes are sent.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": _encode_headers(response, len(body)),
        }
    )
    await send({"type": "http.response.body", "body": b"" if head else body})
