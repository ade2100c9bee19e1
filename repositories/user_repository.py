# backend/repositories/user_repository.py
from database.connection import get_db
from auth.utils import hash_password
from errors import NotFoundError, ValidationError
from models.user import UserCreate, UserUpdate
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime, timezone
from pymongo import ReturnDocument
from typing import List, Optional
import logging

logger = logging.getLogger("repositories.users")

USERS_COLLECTION = "users"

# Campos internos que nunca salen por la API
PRIVATE_FIELDS = ("password",)


def _collection():
    return get_db()[USERS_COLLECTION]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        logger.warning(f"⚠️ ID de usuario inválido: {user_id}")
        return None

# ------------------------------------------------------------
# 🔹 Serialización segura de usuario
# ------------------------------------------------------------
def serialize_user(user: dict) -> Optional[dict]:
    """Convierte ObjectId a str y limpia campos no serializables."""
    if not user:
        return None
    user_copy = dict(user)
    user_copy["id"] = str(user_copy["_id"])
    user_copy.pop("_id", None)
    for field in PRIVATE_FIELDS:
        user_copy.pop(field, None)  # nunca exponer password
    return user_copy

# ------------------------------------------------------------
# 🔹 Verificar email libre
# ------------------------------------------------------------
def _ensure_email_available(email: str, exclude_id: ObjectId = None):
    query = {"email": email}
    if exclude_id is not None:
        query["_id"] = {"$ne": exclude_id}
    if _collection().find_one(query):
        logger.warning(f"⚠️ Email ya registrado: {email}")
        raise ValidationError("El email ya está registrado.")

# ------------------------------------------------------------
# 🔹 Crear usuario
# ------------------------------------------------------------
def create_user(user: UserCreate, status: str = "offline") -> dict:
    _ensure_email_available(user.email)

    now = _now()
    user_doc = {
        "username": user.username,
        "email": user.email,
        "password": hash_password(user.password),
        "avatar": user.avatar,
        "status": status,
        "role": "user",
        "is_verified": True,
        "last_seen": now,
        "created_at": now,
        "updated_at": now,
    }
    result = _collection().insert_one(user_doc)
    user_doc["_id"] = result.inserted_id
    logger.info(f"✅ Usuario creado con ID {result.inserted_id}")
    return serialize_user(user_doc)

# ------------------------------------------------------------
# 🔹 Obtener usuario
# ------------------------------------------------------------
def get_user_by_id(user_id: str) -> dict:
    obj_id = _object_id(user_id)
    doc = _collection().find_one({"_id": obj_id}) if obj_id else None
    if not doc:
        logger.info(f"❌ Usuario no encontrado: {user_id}")
        raise NotFoundError("Usuario no encontrado.")
    return serialize_user(doc)


def get_user_by_email(email: str, include_password: bool = False) -> Optional[dict]:
    doc = _collection().find_one({"email": email.strip().lower()})
    if not doc:
        return None
    if include_password:
        user = serialize_user(doc)
        user["password"] = doc.get("password")
        return user
    return serialize_user(doc)

# ------------------------------------------------------------
# 🔹 Listar todos los usuarios
# ------------------------------------------------------------
def get_all_users() -> List[dict]:
    return [serialize_user(user) for user in _collection().find()]

# ------------------------------------------------------------
# 🔹 Actualizar usuario
# ------------------------------------------------------------
def update_user(user_id: str, changes: UserUpdate) -> dict:
    obj_id = _object_id(user_id)
    if obj_id is None:
        raise NotFoundError("Usuario no encontrado.")

    update_data = changes.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in update_data:
        _ensure_email_available(update_data["email"], exclude_id=obj_id)
    if "password" in update_data:
        update_data["password"] = hash_password(update_data["password"])
    return _apply_update(obj_id, update_data)


def touch_status(user_id: str, status: str) -> dict:
    """Marca el estado de presencia (online/offline/away) y last_seen."""
    obj_id = _object_id(user_id)
    if obj_id is None:
        raise NotFoundError("Usuario no encontrado.")
    return _apply_update(obj_id, {"status": status, "last_seen": _now()})


def _apply_update(obj_id: ObjectId, update_data: dict) -> dict:
    update_data["updated_at"] = _now()
    doc = _collection().find_one_and_update(
        {"_id": obj_id},
        {"$set": update_data},
        return_document=ReturnDocument.AFTER,
    )
    if not doc:
        logger.warning(f"⚠️ Usuario no encontrado para actualizar: {obj_id}")
        raise NotFoundError("Usuario no encontrado.")
    logger.info(f"📝 Usuario actualizado: {obj_id}")
    return serialize_user(doc)

# ------------------------------------------------------------
# 🔹 Eliminar usuario por ID
# ------------------------------------------------------------
def delete_user_by_id(user_id: str) -> None:
    obj_id = _object_id(user_id)
    result = _collection().delete_one({"_id": obj_id}) if obj_id else None
    if result is None or result.deleted_count == 0:
        logger.warning(f"⚠️ Usuario no encontrado para eliminar: {user_id}")
        raise NotFoundError("Usuario no encontrado.")
    logger.info(f"🗑️ Usuario eliminado con ID {user_id}")
