# backend/routes/user_routes.py
from fastapi import APIRouter, status
from models.user import User, UserCreate, UserUpdate
from repositories.user_repository import (
    create_user,
    get_user_by_id,
    get_all_users,
    update_user,
    delete_user_by_id,
)
from typing import List
import logging

router = APIRouter()
logger = logging.getLogger("routes.users")

# ------------------------------------------------------------
# 🔹 Listar usuarios
# ------------------------------------------------------------
@router.get("/", response_model=List[User], summary="Obtener lista de usuarios")
def list_users():
    users = get_all_users()
    if not users:
        logger.info("ℹ️ No hay usuarios registrados.")
    return users

# ------------------------------------------------------------
# 🔹 Crear usuario
# ------------------------------------------------------------
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, summary="Crear usuario")
def add_user(user: UserCreate):
    logger.info(f"🧩 Intentando crear usuario: {user.email}")
    return create_user(user)

# ------------------------------------------------------------
# 🔹 Obtener usuario por ID
# ------------------------------------------------------------
@router.get("/{user_id}", response_model=User, summary="Obtener usuario por ID")
def get_user(user_id: str):
    return get_user_by_id(user_id)

# ------------------------------------------------------------
# 🔹 Actualizar usuario (PUT y PATCH aceptan cambios parciales)
# ------------------------------------------------------------
@router.put("/{user_id}", response_model=User, summary="Actualizar usuario")
@router.patch("/{user_id}", response_model=User, summary="Actualizar usuario (parcial)")
def edit_user(user_id: str, changes: UserUpdate):
    return update_user(user_id, changes)

# ------------------------------------------------------------
# 🔹 Eliminar usuario
# ------------------------------------------------------------
@router.delete("/{user_id}", summary="Eliminar usuario por ID")
def remove_user(user_id: str):
    delete_user_by_id(user_id)
    return {"message": "Usuario eliminado correctamente", "id": user_id}
