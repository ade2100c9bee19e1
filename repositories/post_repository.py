# backend/repositories/post_repository.py
from database.connection import get_db
from errors import NotFoundError
from models.post import PostCreate, PostUpdate
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime, timezone
from pymongo import ReturnDocument
from typing import Dict, List, Optional
import logging

logger = logging.getLogger("repositories.posts")

# ============================================================
# 🗂️ Colección de posts
# ============================================================
POSTS_COLLECTION = "posts"


def _collection():
    return get_db()[POSTS_COLLECTION]


def _object_id(post_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(post_id)
    except (InvalidId, TypeError):
        logger.warning(f"⚠️ ID de post inválido: {post_id}")
        return None

# ============================================================
# 🔹 Serializador de post
# ============================================================
def serialize_post(doc: dict) -> Optional[Dict]:
    if not doc:
        return None
    post = dict(doc)
    post["id"] = str(post.get("_id"))
    post.pop("_id", None)
    return post

# ============================================================
# 🔹 Crear post
# ============================================================
def create_post(post: PostCreate) -> Dict:
    now = datetime.now(timezone.utc).isoformat()
    post_doc = {
        "author_id": post.author_id,
        "title": post.title,
        "content": post.content,
        "created_at": now,
        "updated_at": now,
    }
    result = _collection().insert_one(post_doc)
    post_doc["_id"] = result.inserted_id
    logger.info(f"✅ Post creado: {result.inserted_id} (autor {post.author_id})")
    return serialize_post(post_doc)

# ============================================================
# 🔹 Obtener todos los posts
# ============================================================
def get_all_posts() -> List[Dict]:
    return [serialize_post(doc) for doc in _collection().find()]

# ============================================================
# 🔹 Obtener post por ID
# ============================================================
def get_post_by_id(post_id: str) -> Dict:
    obj_id = _object_id(post_id)
    doc = _collection().find_one({"_id": obj_id}) if obj_id else None
    if not doc:
        logger.info(f"❌ Post no encontrado: {post_id}")
        raise NotFoundError("Post no encontrado.")
    return serialize_post(doc)

# ============================================================
# 🔹 Actualizar post
# ============================================================
def update_post(post_id: str, changes: PostUpdate) -> Dict:
    obj_id = _object_id(post_id)
    if obj_id is None:
        raise NotFoundError("Post no encontrado.")

    update_data = changes.model_dump(exclude_unset=True)
    # title puede quedar en null; content no
    if update_data.get("content") is None:
        update_data.pop("content", None)
    update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

    doc = _collection().find_one_and_update(
        {"_id": obj_id},
        {"$set": update_data},
        return_document=ReturnDocument.AFTER,
    )
    if not doc:
        logger.warning(f"⚠️ Post no encontrado para actualizar: {post_id}")
        raise NotFoundError("Post no encontrado.")
    logger.info(f"📝 Post actualizado: {post_id}")
    return serialize_post(doc)

# ============================================================
# 🔹 Eliminar post
# ============================================================
def delete_post(post_id: str) -> None:
    obj_id = _object_id(post_id)
    result = _collection().delete_one({"_id": obj_id}) if obj_id else None
    if result is None or result.deleted_count == 0:
        logger.warning(f"⚠️ No se encontró post para eliminar: {post_id}")
        raise NotFoundError("Post no encontrado.")
    logger.info(f"🗑️ Post eliminado: {post_id}")
