# backend/auth/routes.py
from fastapi import APIRouter, Depends, status
from models.user import User
from .models import AuthResponse, UserRegister, UserLogin
from .controllers import (
    register_user, login_with_password, get_current_user, logout_user
)

router = APIRouter()

# ------------------------------------------------------------
# 🔹 Registro
# ------------------------------------------------------------
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(data: UserRegister):
    return register_user(data)

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.post("/login", response_model=AuthResponse)
def login(data: UserLogin):
    return login_with_password(data)

# ------------------------------------------------------------
# 🔹 Usuario actual
# ------------------------------------------------------------
@router.get("/me", response_model=User)
def me(user: dict = Depends(get_current_user)):
    return user

# ------------------------------------------------------------
# 🔹 Logout
# ------------------------------------------------------------
@router.post("/logout")
def logout(user: dict = Depends(get_current_user)):
    return logout_user(user)
