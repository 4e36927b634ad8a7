# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/security.py

Utilidades de seguridad de Atelier.

Incluye:
- Hasheo y verificación de contraseñas (Argon2id via passlib)
- Emisión y validación de JWT de acceso (python-jose)

La configuración (secreto, algoritmo, expiración) se lee en cada llamada
desde get_settings() para respetar el entorno activo.

Autor: Atelier
Fecha: 12/08/2026
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import logging
import uuid

from passlib.context import CryptContext
from jose import JWTError, jwt, ExpiredSignatureError

from app.shared.config import get_settings

logger = logging.getLogger(__name__)

# ===== PASSWORD HASHING (Argon2id) =====
# Límite máximo para prevenir DoS con payloads gigantes
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=65536,  # 64 MB
    argon2__time_cost=3,
    argon2__parallelism=2,
)


class PasswordTooLongError(ValueError):
    """Contraseña excede el límite máximo permitido."""


def hash_password(password: str) -> str:
    """
    Hash Argon2id de la contraseña.

    Raises:
        PasswordTooLongError: Si la contraseña excede MAX_PASSWORD_LENGTH
    """
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(f"La contraseña no puede exceder {MAX_PASSWORD_LENGTH} caracteres")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """False si no coincide, si no hay hash o si la contraseña es demasiado larga."""
    if not hashed_password or len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Hash con formato desconocido
        logger.warning("[Security] hash de contraseña no reconocido")
        return False


# ===== JWT =====
ACCESS_TOKEN_TYPE = "access"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    token_type: str = ACCESS_TOKEN_TYPE,
) -> str:
    """
    Crea un JWT firmado con exp, iat, jti y token_type.

    Args:
        data: Payload base (ej: {"sub": user_id, "role": "ADMIN"})
        expires_delta: Duración (None = ACCESS_TOKEN_EXPIRE_MINUTES)
        token_type: Tipo de token (por defecto "access")
    """
    settings = get_settings()
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    iat = _now_utc()
    to_encode.update({
        "exp": iat + expires_delta,
        "iat": iat,
        "jti": uuid.uuid4().hex,
        "token_type": token_type,
    })
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Payload si el token es válido; None si expiró o es inválido."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        logger.info("[Security] token expirado")
        return None
    except JWTError as e:
        logger.warning("[Security] token inválido: %s", e)
        return None


def verify_token_type(token: str, expected_type: str = ACCESS_TOKEN_TYPE) -> Optional[Dict[str, Any]]:
    """Payload si el token es válido y de tipo `expected_type`; None en otro caso."""
    payload = decode_token(token)
    if not payload:
        return None
    if payload.get("token_type") != expected_type:
        logger.warning(
            "[Security] tipo de token no coincide: esperado=%s recibido=%s",
            expected_type,
            payload.get("token_type"),
        )
        return None
    return payload


__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "verify_token_type",
    "MAX_PASSWORD_LENGTH",
    "PasswordTooLongError",
    "ACCESS_TOKEN_TYPE",
]

# Fin del archivo backend/app/shared/utils/security.py
