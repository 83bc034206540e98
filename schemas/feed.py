from pydantic import BaseModel
from typing import Optional
from datetime import datetime

DEFAULT_CATEGORY = "General"


class AuthorFields(BaseModel):
    email: str
    display_name: Optional[str] = None
    profile_picture_url: Optional[str] = None


class PostCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    author_email: Optional[str] = None
    image_url: Optional[str] = None


class PostResponse(AuthorFields):
    id: int
    title: str
    content: str
    category: str
    location: str
    image_url: Optional[str] = None
    author_id: int
    created_at: Optional[datetime] = None


class CommentCreate(BaseModel):
    post_id: Optional[int] = None
    content: Optional[str] = None
    author_email: Optional[str] = None


class CommentResponse(AuthorFields):
    id: int
    post_id: int
    author_id: int
    content: str
    created_at: Optional[datetime] = None


class CreatedResponse(BaseModel):
    id: int
    message: str
