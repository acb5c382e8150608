from typing import Iterable, Tuple

# Front-end bundle is served from this app; the calendar only talks to /api/*.
DEFAULT_CSP = (
    "default-src 'self'; "
    "img-src 'self' data:; "
    "style-src 'self' 'unsafe-inline'; "
    "script-src 'self'; "
    "connect-src 'self'"
)


class SecurityHeadersMiddleware:
    def __init__(self, app, csp: str = DEFAULT_CSP, hsts: bool = True):
        self.app = app
        self.headers = list(self._headers(csp, hsts))

    @staticmethod
    def _headers(csp: str, hsts: bool) -> Iterable[Tuple[bytes, bytes]]:
        pairs = [
            ("x-content-type-options", "nosniff"),
            ("x-frame-options", "DENY"),
            ("referrer-policy", "no-referrer"),
            ("content-security-policy", csp),
        ]
        if hsts:
            pairs.append(("strict-transport-security", "max-age=31536000; includeSubDomains"))
        for name, value in pairs:
            yield name.encode("latin-1"), value.encode("latin-1")

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", []).extend(self.headers)
            await send(message)

        await self.app(scope, receive, send_wrapper)
