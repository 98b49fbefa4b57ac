"""Request body size limit.

A plain ASGI middleware so the count covers the bytes actually received:
a declared ``Content-Length`` over the limit is refused up front, and a
chunked body is counted as it streams in.  Once the running total passes
the limit the rest of the app's response is discarded and the client gets
413 ``{"error": "Request body too large"}`` instead.
"""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

BODY_TOO_LARGE_MESSAGE = "Request body too large"


class BodyTooLarge(Exception):
    """Raised from ``receive`` once the body passes the limit."""


class BodySizeLimitMiddleware:
    """Refuse request bodies larger than *max_body_bytes* with 413.

    Args:
        app: The wrapped ASGI application.
        max_body_bytes: Largest accepted body, in bytes.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length is not None and length.isdigit() and int(length) > self.max_body_bytes:
            await self._reject(scope, receive, send)
            return

        received = 0
        exceeded = False
        response_started = False

        async def counting_receive() -> Message:
            nonlocal received, exceeded
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    exceeded = True
                    raise BodyTooLarge()
            return message

        async def guarded_send(message: Message) -> None:
            nonlocal response_started
            # Whatever the app answers after the overflow is replaced below.
            if exceeded:
                return
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, counting_receive, guarded_send)
        except BodyTooLarge:
            pass

        if exceeded and not response_started:
            await self._reject(scope, receive, send)

    @staticmethod
    async def _reject(scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse({"error": BODY_TOO_LARGE_MESSAGE}, status_code=413)
        await response(scope, receive, send)
