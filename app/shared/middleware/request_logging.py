# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/request_logging.py

Log de una línea por request: método, path, status y duración.
Las rutas ruidosas (/metrics, /health) se excluyen por defecto.

Autor: Atelier
Fecha: 12/08/2026
"""

from __future__ import annotations

import logging
import re
import time
from typing import Callable, Iterable, Optional, Pattern

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .exception_handler import get_request_id

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE: tuple[Pattern[str], ...] = (
    re.compile(r"^/metrics"),
    re.compile(r"^/health"),
    re.compile(r"^/favicon\.ico"),
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, exclude_patterns: Optional[Iterable[Pattern[str]]] = None):
        super().__init__(app)
        self.exclude_patterns = tuple(exclude_patterns) if exclude_patterns is not None else DEFAULT_EXCLUDE

    def should_log(self, path: str) -> bool:
        return not any(p.match(path) for p in self.exclude_patterns)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if not self.should_log(path):
            return await call_next(request)

        request_id = getattr(request.state, "request_id", None) or get_request_id(request)
        request.state.request_id = request_id

        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            level = logging.WARNING if status >= 500 else logging.INFO
            logger.log(
                level,
                "[HTTP] %s %s → %d (%.2f ms) request_id=%s",
                request.method,
                path,
                status,
                duration_ms,
                request_id,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": path,
                    "status": status,
                    "duration_ms": round(duration_ms, 2),
                },
            )


__all__ = ["RequestLoggingMiddleware", "DEFAULT_EXCLUDE"]

# Fin del archivo backend/app/shared/middleware/request_logging.py
