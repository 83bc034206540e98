from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class NoteCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    author_name: Optional[str] = None

class NoteResponse(BaseModel):
    id: int
    title: str
    content: str
    category: str
    location: str
    author_name: str
    created_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True
