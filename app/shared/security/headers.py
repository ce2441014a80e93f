"""
Secure HTTP headers middleware.

Every response carries restrictive headers. User records are
personal data, so responses are also marked as non-cacheable.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
    "Cache-Control": "no-store",
}

# Swagger UI loads its assets from a CDN and would be blocked by the CSP.
DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            if header_name == "Content-Security-Policy" and request.url.path.startswith(
                DOCS_PATHS
            ):
                continue
            response.headers[header_name] = header_value
        return response
