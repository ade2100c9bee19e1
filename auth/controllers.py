# backend/auth/controllers.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from config import settings
from errors import AuthError, NotFoundError
from repositories.user_repository import (
    create_user, get_user_by_email, get_user_by_id, touch_status
)
from .utils import verify_password, create_access_token, decode_access_token
from .models import UserRegister, UserLogin
import logging

logger = logging.getLogger("auth.controllers")

security = HTTPBearer(auto_error=False)


def _session(user: dict) -> dict:
    token = create_access_token(user["id"])
    return {
        "token": token,
        "expires_in": settings.JWT_EXPIRES_MINUTES * 60,
        "user": user,
    }

# =====================================================
# 🔹 Registrar usuario (signup)
# =====================================================
def register_user(data: UserRegister) -> dict:
    user = create_user(data, status="online")
    logger.info(f"✅ Usuario registrado: {user['email']}")
    return _session(user)

# =====================================================
# 🔹 Login con password
# =====================================================
def login_with_password(data: UserLogin) -> dict:
    user = get_user_by_email(data.email, include_password=True)
    if not user or not verify_password(data.password, user.pop("password", None)):
        logger.warning(f"⚠️ Credenciales inválidas para {data.email}")
        raise AuthError("Credenciales inválidas.")

    user = touch_status(user["id"], "online")
    return _session(user)

# =====================================================
# 🔹 Usuario actual a partir del token Bearer
# =====================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("No autenticado.")

    claims = decode_access_token(credentials.credentials)
    if not claims or not claims.get("sub"):
        raise AuthError("Token inválido o expirado.")

    try:
        return get_user_by_id(claims["sub"])
    except NotFoundError:
        raise AuthError("Usuario no encontrado.")

# =====================================================
# 🔹 Logout
# =====================================================
def logout_user(user: dict) -> dict:
    touch_status(user["id"], "offline")
    logger.info(f"👋 Usuario desconectado: {user['email']}")
    return {"message": f"Usuario {user['email']} desconectado correctamente."}
