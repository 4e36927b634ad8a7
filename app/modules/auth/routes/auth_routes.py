# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/auth_routes.py

Rutas de sesión:
- POST /auth/login
- GET  /auth/me

Autor: Atelier
Fecha: 12/08/2026
"""

# Note: NOT using 'from __future__ import annotations' to ensure FastAPI
# can properly resolve Request type annotation for dependency injection

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.modules.auth.facades import InvalidCredentials
from app.modules.auth.routes.deps import get_auth_service
from app.modules.auth.schemas import LoginRequest, LoginResponse, UserRead
from app.modules.auth.services import AuthService, get_current_user
from app.shared.http_utils.request_meta import get_client_ip

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse, summary="Iniciar sesión")
async def login(
    payload: LoginRequest,
    request: Request,
    svc: AuthService = Depends(get_auth_service),
):
    """Valida credenciales y devuelve un access token Bearer."""
    try:
        token, user = await svc.login(
            email=payload.email,
            password=payload.password,
            ip_address=get_client_ip(request),
        )
    except InvalidCredentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return LoginResponse(access_token=token, user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead, summary="Usuario autenticado")
async def me(user=Depends(get_current_user)):
    return UserRead.model_validate(user)

# Fin del archivo backend/app/modules/auth/routes/auth_routes.py
