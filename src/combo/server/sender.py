"""Response -> ASGI ``http.response.start`` / ``http.response.body``."""

from combo._internal.asgi import Send
from combo.http.response import Response

# RFC 9110: 1xx, 204 and 304 carry no content
_NO_BODY = frozenset({204, 304})


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* in two messages.

    ``content-length`` always describes the body a GET would get; for
    HEAD (*head*) the body message is empty.
    """
    if response.status < 200 or response.status in _NO_BODY:
        body = b""
    else:
        body = response.body_bytes

    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in response.headers
    )
    headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
