from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Optional
import time
import logging

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging"""

    def __init__(self, app, exclude_paths: Optional[list] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/docs",
            "/redoc",
            "/openapi.json",
            "/uploads",
            "/favicon.ico",
            "/health",
        ]

    async def dispatch(self, request: Request, call_next):
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path
        client_ip = self._get_client_ip(request)

        try:
            response = await call_next(request)
        except Exception:
            logger.error(f"Request failed: {method} {path} - IP: {client_ip}")
            raise

        response_time = time.time() - start_time
        message = (
            f"Request: {method} {path} - Status: {response.status_code} - "
            f"Time: {response_time:.3f}s - IP: {client_ip}"
        )
        if response.status_code >= 500:
            logger.error(message)
        elif response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)

        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request"""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"
