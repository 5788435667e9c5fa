"""
Request Logging Middleware
==========================

Logs every API request (method, path, status, duration, caller role).
Request bodies are logged at DEBUG level with sensitive fields redacted.
"""

import json
import logging
import time
from typing import Set

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...auth import verify_token

logger = logging.getLogger("ressources_mg.api.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log API requests.

    Features:
    - Logs request method, path, status code, duration
    - Tags requests carrying a valid webmaster token
    - Redacts sensitive fields from request bodies
    - Excludes health checks and docs
    """

    # Paths to exclude from logging
    EXCLUDED_PATHS: Set[str] = {
        "/health",
        "/openapi.json",
        "/favicon.ico",
        "/api/v1/auth/verify",  # polled by the back office
    }

    EXCLUDED_PREFIXES: Set[str] = {
        "/docs",
        "/redoc",
    }

    # Sensitive fields to redact in request body
    SENSITIVE_FIELDS: Set[str] = {
        "password",
        "token",
        "secret",
        "authorization",
    }

    MAX_BODY_SIZE: int = 10000

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process the request and log it."""
        path = request.url.path
        if self._should_skip(path):
            return await call_next(request)

        start_time = time.time()
        role = self._extract_role(request)

        if request.method in {"POST", "PUT", "PATCH"} and logger.isEnabledFor(logging.DEBUG):
            body = await request.body()
            if len(body) <= self.MAX_BODY_SIZE:
                logger.debug(f"{request.method} {path} body={self._sanitize_body(body.decode('utf-8', 'replace'))}")

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = int((time.time() - start_time) * 1000)
            level = logging.WARNING if status_code >= 500 else logging.INFO
            logger.log(level, f"{request.method} {path} -> {status_code} ({duration_ms} ms, {role})")

    def _should_skip(self, path: str) -> bool:
        return path in self.EXCLUDED_PATHS or path.startswith(tuple(self.EXCLUDED_PREFIXES))

    def _extract_role(self, request: Request) -> str:
        auth_header = request.headers.get("authorization", "")
        if auth_header.startswith("Bearer ") and verify_token(auth_header[7:]):
            return "webmaster"
        return "anonymous"

    def _sanitize_body(self, body: str) -> str:
        """Redact sensitive fields from a JSON body."""
        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            return body[:200]
        return json.dumps(self._sanitize(data), ensure_ascii=False)

    def _sanitize(self, data):
        if isinstance(data, dict):
            return {
                key: "[REDACTED]" if key.lower() in self.SENSITIVE_FIELDS else self._sanitize(value)
                for key, value in data.items()
            }
        if isinstance(data, list):
            return [self._sanitize(item) for item in data]
        return data
