# -*- coding: utf-8 -*-
"""
backend/app/observability/prom.py

Configuración de observabilidad Prometheus para Atelier.

Incluye:
- Middleware HTTP para conteo y latencia por ruta/estado
- Endpoint /metrics compatible con Prometheus (pull model)
- Soporte multiproceso (PROMETHEUS_MULTIPROC_DIR)
- Contadores de dominio (stages, chat, notificaciones, Dropbox)

Autor: Atelier
Fecha: 12/08/2026
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    multiprocess,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

# ===== CAPA HTTP =====
REQUEST_COUNT = Counter(
    "atelier_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "atelier_http_request_latency_seconds",
    "Latency per request (s)",
    ["method", "path", "status"],
)

# ===== DOMINIO =====
STAGE_TRANSITIONS = Counter(
    "atelier_stage_transitions_total",
    "Stage actions applied (start, complete, reopen, bulk, ...)",
    ["action"],
)
CHAT_MESSAGES = Counter(
    "atelier_chat_messages_total",
    "Chat messages posted on stages",
)
NOTIFICATIONS_CREATED = Counter(
    "atelier_notifications_created_total",
    "In-app notifications created",
    ["type"],
)
DROPBOX_CALLS = Counter(
    "atelier_dropbox_calls_total",
    "Dropbox API calls by operation and outcome",
    ["operation", "outcome"],
)


def _route_template(request) -> str:
    """Usa el path-template de la ruta resuelta para acotar cardinalidad."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware para instrumentar peticiones HTTP en FastAPI."""

    async def dispatch(self, request, call_next):
        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        method = request.method
        path = _route_template(request)
        status = str(resp.status_code)
        REQUEST_LATENCY.labels(method, path, status).observe(elapsed)
        REQUEST_COUNT.labels(method, path, status).inc()
        return resp


def _build_registry() -> Optional[CollectorRegistry]:
    """Registry multiproceso cuando PROMETHEUS_MULTIPROC_DIR está definido."""
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return None


def mount_metrics(app: FastAPI, path: str = "/metrics") -> None:
    """Registra el endpoint /metrics en la app FastAPI."""
    registry = _build_registry()

    @app.get(path, include_in_schema=False)
    def metrics():
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI, *, http_metrics: bool = True) -> None:
    """Agrega middleware de Prometheus (opcional) y monta /metrics."""
    if http_metrics:
        app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = [
    "PrometheusMiddleware",
    "mount_metrics",
    "setup_observability",
    "STAGE_TRANSITIONS",
    "CHAT_MESSAGES",
    "NOTIFICATIONS_CREATED",
    "DROPBOX_CALLS",
]

# Fin del archivo backend/app/observability/prom.py
