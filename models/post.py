# backend/models/post.py
from pydantic import BaseModel, Field
from typing import Optional


class PostCreate(BaseModel):
    author_id: str = Field(..., min_length=1)
    title: Optional[str] = Field(None, max_length=200)
    content: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    content: Optional[str] = Field(None, min_length=1)


class Post(BaseModel):
    id: str
    author_id: str
    title: Optional[str] = None
    content: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
