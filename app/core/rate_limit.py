"""
Rate limiting (slowapi).

- /api routes:       1000 requests / 15 min in development, 100 elsewhere
- Login:             5 attempts / 15 min per IP
- Register / reset:  10 attempts / 15 min per IP
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.core.config import get_settings

settings = get_settings()

LOGIN_LIMIT = "5 per 15 minutes"
MODERATE_LIMIT = "10 per 15 minutes"
DEFAULT_LIMIT = "1000 per 15 minutes" if settings.is_development else "100 per 15 minutes"

LOGIN_MESSAGE = "Too many login attempts. Please try again after 15 minutes."
MODERATE_MESSAGE = "Too many requests from this IP. Please try again later."
DEFAULT_MESSAGE = "Too many requests from this IP, please try again later."


def client_ip(request: Request) -> str:
    """
    Client address for rate-limit keys.

    Behind one trusted proxy the address is the last X-Forwarded-For entry,
    the one the proxy appended itself. Earlier entries come from the client.
    """
    if settings.trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            last_hop = forwarded.split(",")[-1].strip()
            if last_hop:
                return last_hop
    return get_remote_address(request) or "unknown"


limiter = Limiter(
    key_func=client_ip,
    default_limits=[DEFAULT_LIMIT],
    enabled=settings.rate_limit_enabled,
)


class ApiRateLimitMiddleware(SlowAPIMiddleware):
    """Apply the default limit to /api only; docs and static files are not counted."""

    async def dispatch(self, request, call_next):
        if not request.url.path.startswith("/api/"):
            return await call_next(request)
        return await super().dispatch(request, call_next)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with the usual {success, message} envelope when a limit is hit."""
    path = request.url.path
    if path.endswith("/login"):
        message = LOGIN_MESSAGE
    elif path.endswith(("/register", "/reset-password")):
        message = MODERATE_MESSAGE
    else:
        message = DEFAULT_MESSAGE
    return JSONResponse(status_code=429, content={"success": False, "message": message})
