"""Immutable HTTP response.

Handlers build one, ``with_status`` / ``with_header`` derive copies, and
the sender turns it into ASGI messages. The test client returns the same
type, so assertions read ``response.text`` and ``response.media_type``.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> "Response":
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        return replace(self, headers=(*self.headers, (name, value)))

    @property
    def body_bytes(self) -> bytes:
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body

    @property
    def media_type(self) -> str:
        """``text/css; charset=utf-8`` -> ``text/css``."""
        return self.content_type.partition(";")[0].strip()
