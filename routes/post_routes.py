# backend/routes/post_routes.py
from fastapi import APIRouter, status
from models.post import Post, PostCreate, PostUpdate
from repositories.post_repository import (
    create_post, get_post_by_id, get_all_posts,
    update_post, delete_post
)
from typing import List

router = APIRouter()

# ------------------------------------------------------------
# 🔹 Listar posts
# ------------------------------------------------------------
@router.get("/", response_model=List[Post], summary="Obtener todos los posts")
def list_posts():
    return get_all_posts()

# ------------------------------------------------------------
# 🔹 Crear post
# ------------------------------------------------------------
@router.post("/", response_model=Post, status_code=status.HTTP_201_CREATED, summary="Crear post")
def add_post(post: PostCreate):
    return create_post(post)

# ------------------------------------------------------------
# 🔹 Obtener post por ID
# ------------------------------------------------------------
@router.get("/{post_id}", response_model=Post, summary="Obtener post por ID")
def get_post(post_id: str):
    return get_post_by_id(post_id)

# ------------------------------------------------------------
# 🔹 Actualizar post
# ------------------------------------------------------------
@router.put("/{post_id}", response_model=Post, summary="Actualizar post")
@router.patch("/{post_id}", response_model=Post, summary="Actualizar post (parcial)")
def edit_post(post_id: str, changes: PostUpdate):
    return update_post(post_id, changes)

# ------------------------------------------------------------
# 🔹 Eliminar post
# ------------------------------------------------------------
@router.delete("/{post_id}", summary="Eliminar post")
def remove_post(post_id: str):
    delete_post(post_id)
    return {"message": "Post eliminado correctamente", "id": post_id}
