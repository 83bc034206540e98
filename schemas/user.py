from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class ProfileResponse(BaseModel):
    id: int
    email: str
    display_name: Optional[str] = None
    profile_picture_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None
    posts_count: int = 0

class ProfileUpdate(BaseModel):
    # every field is optional so missing ones are reported as 401/404, not 422
    email: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    profile_picture_url: Optional[str] = None

class MessageResponse(BaseModel):
    message: str
