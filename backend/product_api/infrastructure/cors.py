"""Single-Origin CORS — only the configured front-end origin may call the API.

Invariants:
    - Requests whose Origin header differs from the allowed origin get 403 "CORS ERROR"
    - Disallowed preflights keep Starlette's 400 "Disallowed CORS origin"
    - Requests without an Origin header (same-origin, server-to-server) pass through
"""

from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import Receive, Scope, Send


class SingleOriginCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that rejects simple requests from foreign origins."""

    async def simple_response(
        self, scope: Scope, receive: Receive, send: Send, request_headers: Headers,
    ) -> None:
        # Starlette may route Origin-less requests here too
        origin = request_headers.get("origin")
        if origin is not None and not self.is_allowed_origin(origin=origin):
            response = PlainTextResponse("CORS ERROR", status_code=403)
            await response(scope, receive, send)
            return
        await super().simple_response(scope, receive, send, request_headers)
