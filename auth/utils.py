# backend/auth/utils.py
import jwt
import bcrypt
from datetime import datetime, timedelta, timezone
from typing import Optional
from config import settings
from errors import ValidationError

ALGORITHM = "HS256"

# =====================================================
# 🔹 Hashing y Tokens
# =====================================================
def hash_password(password: str) -> str:
    try:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode()
    except ValueError as e:
        raise ValidationError(str(e))

def verify_password(password: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # bcrypt rechaza contraseñas de más de 72 bytes
        return False

def create_access_token(user_id: str, expires_minutes: int = None) -> str:
    minutes = expires_minutes if expires_minutes is not None else settings.JWT_EXPIRES_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> Optional[dict]:
    """Devuelve los claims o None si el token es inválido o expiró."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.PyJWTError:
        return None
