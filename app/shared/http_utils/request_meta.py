# -*- coding: utf-8 -*-
"""
backend/app/shared/http_utils/request_meta.py

IP de cliente para el registro de actividad, con soporte opcional de
headers de proxy (X-Forwarded-For / X-Real-IP) vía TRUST_PROXY_HEADERS.

Autor: Atelier
Fecha: 12/08/2026
"""
from __future__ import annotations

import os
from typing import Optional

from starlette.requests import Request


def trust_proxy_headers() -> bool:
    """TRUST_PROXY_HEADERS=true cuando la API corre detrás de un proxy propio."""
    return os.getenv("TRUST_PROXY_HEADERS", "false").lower() in ("true", "1", "yes")


def get_client_ip(request: Request) -> Optional[str]:
    """
    IP del cliente.

    Con proxy de confianza usa el primer valor de X-Forwarded-For o X-Real-IP;
    si no, la IP del socket. None cuando no se puede determinar.
    """
    if trust_proxy_headers():
        xff = request.headers.get("x-forwarded-for")
        if xff:
            return xff.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return None


__all__ = ["get_client_ip", "trust_proxy_headers"]
